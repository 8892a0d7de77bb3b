"""Tests for the placement validator service."""

from __future__ import annotations

from boardcheck.core.enums import Color, PieceType
from boardcheck.core.types import A1, A2, D1, E1, E4, H1
from boardcheck.validation import (
    ConflictKind,
    PlacementValidator,
    ValidatorSettings,
    render_text,
)
from boardcheck.validation.models import PieceCountDelta, Placement


def _validate(lines: list[str], **settings: bool):
    return PlacementValidator(ValidatorSettings(**settings)).validate(lines)


def _counts(deltas: tuple[PieceCountDelta, ...]) -> dict[str, int]:
    return {str(d.piece): abs(d.delta) for d in deltas}


class TestCompleteLayout:
    def test_starting_layout_is_clean(self, starting_lines: list[str]) -> None:
        report = _validate(starting_lines)
        assert report.is_clean
        assert len(report.white.valid_starting) == 16
        assert len(report.black.valid_starting) == 16

    def test_empty_input_reports_everything_missing(self) -> None:
        report = _validate([])
        for side in report.sides:
            assert _counts(side.missing) == {
                pt.value: pt.expected_count for pt in PieceType
            }
            assert side.extra == ()
            assert side.valid_starting == ()
            assert side.conflicts == ()
            assert side.invalid == ()

    def test_missing_in_canonical_order(self) -> None:
        report = _validate([])
        assert [d.piece for d in report.white.missing] == list(PieceType)


class TestScenarios:
    def test_rooks_and_king_only(self) -> None:
        report = _validate(["White Rook A1", "White Rook H1", "White King E1"])
        white = report.white
        assert white.valid_starting == (
            Placement(Color.WHITE, "King", E1),
            Placement(Color.WHITE, "Rook", A1),
            Placement(Color.WHITE, "Rook", H1),
        )
        assert white.valid_non_starting == ()
        assert white.conflicts == ()
        assert white.invalid == ()
        assert _counts(white.missing) == {"Queen": 1, "Bishop": 2, "Knight": 2, "Pawn": 8}
        assert white.extra == ()

    def test_pawn_on_back_rank_is_non_starting(self) -> None:
        white = _validate(["White Pawn A1"]).white
        assert white.valid_non_starting == (Placement(Color.WHITE, "Pawn", A1),)
        assert white.valid_starting == ()

    def test_off_board_king_is_invalid_and_still_missing(self) -> None:
        white = _validate(["White King Z9"]).white
        assert [i.describe() for i in white.invalid] == ["White King at Z9"]
        assert white.valid_starting == ()
        assert white.valid_non_starting == ()
        assert _counts(white.missing)["King"] == 1

    def test_two_types_on_one_square_conflict(self) -> None:
        white = _validate(["White King E1", "White Queen E1"]).white
        assert {(c.piece, c.kind) for c in white.conflicts} == {
            ("King", ConflictKind.CONTESTED),
            ("Queen", ConflictKind.CONTESTED),
        }
        assert white.valid_starting == ()
        assert white.valid_non_starting == ()
        # Conflicting placements still count toward the tally.
        assert "King" not in _counts(white.missing)
        assert "Queen" not in _counts(white.missing)

    def test_three_queens_on_distinct_squares(self) -> None:
        white = _validate(["White Queen D1", "White Queen E4", "White Queen A2"]).white
        assert [d.describe() for d in white.extra] == ["2 extra White Queen"]
        assert white.valid_starting == (Placement(Color.WHITE, "Queen", D1),)
        assert {p.square for p in white.valid_non_starting} == {E4, A2}
        assert white.conflicts == ()

    def test_same_type_twice_on_one_square_is_duplicate(self) -> None:
        white = _validate(["White Pawn A2", "White Pawn A2"]).white
        assert len(white.conflicts) == 1
        conflict = white.conflicts[0]
        assert conflict.kind == ConflictKind.DUPLICATE
        assert conflict.copies == 2
        assert conflict.describe() == "White Pawn in [A2] placed 2 times"
        assert white.valid_starting == ()
        assert _counts(white.missing)["Pawn"] == 6

    def test_contested_and_duplicate_on_same_square(self) -> None:
        white = _validate(["White Pawn A2", "White Pawn A2", "White Rook A2"]).white
        assert [(c.piece, c.kind) for c in white.conflicts] == [
            ("Pawn", ConflictKind.CONTESTED),
            ("Pawn", ConflictKind.DUPLICATE),
            ("Rook", ConflictKind.CONTESTED),
        ]

    def test_cross_side_sharing_is_not_a_conflict(self) -> None:
        report = _validate(["White King E4", "Black King E4"])
        assert report.white.conflicts == ()
        assert report.black.conflicts == ()
        assert report.white.valid_non_starting == (Placement(Color.WHITE, "King", E4),)
        assert report.black.valid_non_starting == (Placement(Color.BLACK, "King", E4),)


class TestDroppedInput:
    def test_malformed_lines_leave_no_trace(self) -> None:
        assert _validate(["White King", "White King at E1", "garbage"]) == _validate([])

    def test_missing_piece_token_leaves_no_trace(self) -> None:
        report = _validate(["White  E4"])
        assert report == _validate([])
        assert "White  in [E4]" not in render_text(report)

    def test_unknown_side_leaves_no_trace(self) -> None:
        assert _validate(["Purple King E1", "Purple King Z9"]) == _validate([])

    def test_sides_are_independent(self) -> None:
        report = _validate(["Black King E8"])
        assert report.white == _validate([]).white
        assert _counts(report.black.missing).get("King") is None


class TestCasePolicy:
    def test_lowercase_invalid_by_default(self) -> None:
        white = _validate(["White Rook a1"]).white
        assert [i.square_token for i in white.invalid] == ["a1"]
        assert white.valid_starting == ()

    def test_lowercase_matches_when_ignoring_case(self) -> None:
        lower = _validate(["White Rook a1"], case_insensitive_squares=True)
        upper = _validate(["White Rook A1"], case_insensitive_squares=True)
        assert lower == upper
        assert lower.white.valid_starting == (Placement(Color.WHITE, "Rook", A1),)


class TestUnknownPieces:
    def test_unknown_piece_surfaces_as_placement_only(self) -> None:
        white = _validate(["White Dragon E4"]).white
        assert white.valid_non_starting == (Placement(Color.WHITE, "Dragon", E4),)
        assert "Dragon" not in _counts(white.missing)
        assert white.extra == ()

    def test_unknown_piece_can_conflict(self) -> None:
        white = _validate(["White Dragon E1", "White King E1"]).white
        assert {c.piece for c in white.conflicts} == {"Dragon", "King"}


class TestRunIndependence:
    def test_repeated_runs_render_identically(self, starting_lines: list[str]) -> None:
        lines = starting_lines + ["White Queen E4", "White King Z9", "Black Pawn A7"]
        validator = PlacementValidator()
        assert render_text(validator.validate(lines)) == render_text(
            validator.validate(lines)
        )

    def test_invalid_entries_do_not_leak_between_runs(self) -> None:
        validator = PlacementValidator()
        validator.validate(["White King Z9"])
        assert validator.validate([]).white.invalid == ()

    def test_input_order_does_not_matter(self, starting_lines: list[str]) -> None:
        lines = starting_lines + ["White King E4", "White Pawn A2"]
        validator = PlacementValidator()
        assert validator.validate(lines) == validator.validate(list(reversed(lines)))


class TestPartitions:
    def test_partitioned_equals_whole(self, starting_lines: list[str]) -> None:
        lines = starting_lines + ["White Queen E4", "Black Knight Z0", "junk"]
        validator = PlacementValidator()
        parts = [lines[::3], lines[1::3], lines[2::3]]
        assert validator.validate_partitions(parts) == validator.validate(lines)

    def test_conflict_spanning_partitions_is_detected(self) -> None:
        validator = PlacementValidator()
        report = validator.validate_partitions([["White King E1"], ["White Queen E1"]])
        assert {c.piece for c in report.white.conflicts} == {"King", "Queen"}

    def test_duplicate_spanning_partitions_is_detected(self) -> None:
        validator = PlacementValidator()
        report = validator.validate_partitions([["Black Pawn A7"], ["Black Pawn A7"]])
        assert [c.kind for c in report.black.conflicts] == [ConflictKind.DUPLICATE]

    def test_no_partitions_is_empty_input(self) -> None:
        validator = PlacementValidator()
        assert validator.validate_partitions([]) == validator.validate([])
