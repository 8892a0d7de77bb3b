"""Canonical starting layout: where each side's pieces begin and how many."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from boardcheck.core.enums import Color, PieceType
from boardcheck.core.types import Square, is_valid_square, make_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class StartingLayout:
    """Immutable per-side starting squares and expected piece counts.

    Built once and shared by reference between validation runs; nothing
    mutates it after construction.
    """

    squares: Mapping[tuple[Color, PieceType], frozenset[Square]]
    expected: Mapping[PieceType, int] = field(
        default_factory=lambda: {pt: pt.expected_count for pt in PieceType}
    )

    def __post_init__(self) -> None:
        for (color, piece_type), squares in self.squares.items():
            for sq in squares:
                if not is_valid_square(sq):
                    raise ValueError(
                        f"Invalid starting square for {color.label} {piece_type}: "
                        f"{sq!r}"
                    )
        for piece_type, count in self.expected.items():
            if count < 0:
                raise ValueError(f"Negative expected count for {piece_type}: {count!r}")
        object.__setattr__(
            self,
            "squares",
            MappingProxyType({k: frozenset(v) for k, v in self.squares.items()}),
        )
        object.__setattr__(self, "expected", MappingProxyType(dict(self.expected)))

    def starting_squares(self, color: Color, piece: str) -> frozenset[Square]:
        """Starting squares of *piece* for *color*; empty for unknown pieces."""
        key = (color, piece)
        return self.squares.get(key, frozenset())  # type: ignore[call-overload]

    def is_starting_square(self, color: Color, piece: str, sq: Square) -> bool:
        return sq in self.starting_squares(color, piece)

    def expected_count(self, piece: str) -> int | None:
        """Expected per-side count, or ``None`` for an untracked piece name."""
        return self.expected.get(piece)  # type: ignore[call-overload]

    @property
    def tracked_pieces(self) -> tuple[PieceType, ...]:
        """Pieces with an expected count, in canonical order."""
        return tuple(self.expected)

    @property
    def total_expected(self) -> int:
        return sum(self.expected.values())

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> StartingLayout:
        """Standard chess starting layout."""
        squares: dict[tuple[Color, PieceType], set[Square]] = {}
        for color, back_rank, pawn_rank in (
            (Color.WHITE, 0, 1),
            (Color.BLACK, 7, 6),
        ):
            for f, pt in enumerate(_BACK_RANK):
                squares.setdefault((color, pt), set()).add(make_square(f, back_rank))
            squares[(color, PieceType.PAWN)] = {
                make_square(f, pawn_rank) for f in range(8)
            }
        return cls({k: frozenset(v) for k, v in squares.items()})


STANDARD_LAYOUT = StartingLayout.standard()
