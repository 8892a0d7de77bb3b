"""Placement validator service: tally → conflicts → per-side report."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from boardcheck.core.enums import Color
from boardcheck.core.layout import STANDARD_LAYOUT, StartingLayout
from boardcheck.validation.models import (
    BoardValidationReport,
    Conflict,
    ConflictKind,
    InvalidPlacement,
    PieceCountDelta,
    Placement,
    SideValidationReport,
)
from boardcheck.validation.tally import BoardTally, SideTally

_LOGGER = logging.getLogger(__name__)


@dataclass
class ValidatorSettings:
    """User-configurable validation behaviour."""

    # Accept "a1" as "A1". Records are matched case-sensitively by default.
    case_insensitive_squares: bool = False
    layout: StartingLayout = STANDARD_LAYOUT


def detect_conflicts(tally: SideTally) -> tuple[Conflict, ...]:
    """Find same-side squares held by more than one piece.

    A square with several distinct piece types yields a ``CONTESTED``
    entry per type; a piece type placed on one square more than once
    yields a ``DUPLICATE`` entry.  Both can apply to the same square.
    """
    conflicts: list[Conflict] = []
    for sq, occupants in tally.occupancy.items():
        contested = len(occupants) > 1
        for piece, copies in occupants.items():
            if contested:
                conflicts.append(
                    Conflict(tally.color, piece, sq, ConflictKind.CONTESTED, copies)
                )
            if copies > 1:
                conflicts.append(
                    Conflict(tally.color, piece, sq, ConflictKind.DUPLICATE, copies)
                )
    conflicts.sort(key=lambda c: (c.piece, c.square, c.kind))
    return tuple(conflicts)


def count_deltas(
    tally: SideTally, layout: StartingLayout
) -> tuple[PieceCountDelta, ...]:
    """Expected minus observed count for every tracked piece type.

    Untracked piece names never appear here; they only surface as
    placements or conflicts.
    """
    return tuple(
        PieceCountDelta(
            tally.color, piece, layout.expected[piece] - tally.observed[piece]
        )
        for piece in layout.tracked_pieces
    )


def build_side_report(tally: SideTally, layout: StartingLayout) -> SideValidationReport:
    """Derive every report section for one side from its tally."""
    starting: list[Placement] = []
    non_starting: list[Placement] = []
    for sq, occupants in tally.occupancy.items():
        if occupants.total() != 1:
            continue
        (piece,) = occupants
        placement = Placement(tally.color, piece, sq)
        if layout.is_starting_square(tally.color, piece, sq):
            starting.append(placement)
        else:
            non_starting.append(placement)

    def _placement_key(p: Placement) -> tuple[str, int]:
        return (p.piece, p.square)

    invalid = [
        InvalidPlacement(tally.color, piece, token)
        for _side, piece, token in sorted(tally.invalid)
    ]
    deltas = count_deltas(tally, layout)
    return SideValidationReport(
        color=tally.color,
        valid_starting=tuple(sorted(starting, key=_placement_key)),
        valid_non_starting=tuple(sorted(non_starting, key=_placement_key)),
        conflicts=detect_conflicts(tally),
        invalid=tuple(invalid),
        missing=tuple(d for d in deltas if d.delta > 0),
        extra=tuple(d for d in deltas if d.delta < 0),
    )


class PlacementValidator:
    """Validates placement records against a starting layout.

    Each call is an independent run; the validator keeps no state between
    calls apart from its settings.
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self._settings = settings or ValidatorSettings()

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    def aggregate(self, lines: Iterable[str]) -> BoardTally:
        """Build a (possibly partial) tally from raw lines."""
        return BoardTally.from_lines(
            lines, case_insensitive_squares=self._settings.case_insensitive_squares
        )

    def report(self, tally: BoardTally) -> BoardValidationReport:
        """Turn a complete tally into the per-side reports."""
        _LOGGER.debug(
            "Validating %d lines (%d malformed, %d unknown side)",
            tally.lines,
            tally.malformed,
            tally.unknown_side,
        )
        layout = self._settings.layout
        return BoardValidationReport(
            white=build_side_report(tally.side(Color.WHITE), layout),
            black=build_side_report(tally.side(Color.BLACK), layout),
        )

    def validate(self, lines: Iterable[str]) -> BoardValidationReport:
        """Validate the complete set of raw placement lines."""
        return self.report(self.aggregate(lines))

    def validate_partitions(
        self, partitions: Iterable[Iterable[str]]
    ) -> BoardValidationReport:
        """Validate input delivered as separate partitions.

        Each partition is tallied on its own and the partial tallies are
        merged before any conflict or count is derived, so the result is
        identical to :meth:`validate` on the concatenated input.
        """
        partials = [self.aggregate(part) for part in partitions]
        _LOGGER.debug("Merging %d partial tallies", len(partials))
        merged = reduce(BoardTally.merge, partials, BoardTally())
        return self.report(merged)
