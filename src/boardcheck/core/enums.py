"""Core enumerations for the placement domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def label(self) -> str:
        """Literal used in placement records, e.g. ``"White"``."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> Color | None:
        """Resolve a case-sensitive side literal; ``None`` if unrecognized."""
        return _COLOR_LABELS.get(label)

    def __str__(self) -> str:
        return self.label


_COLOR_LABELS: dict[str, Color] = {c.name.capitalize(): c for c in Color}


class PieceType(StrEnum):
    """Chess piece types in canonical report order."""

    KING = "King"
    QUEEN = "Queen"
    ROOK = "Rook"
    BISHOP = "Bishop"
    KNIGHT = "Knight"
    PAWN = "Pawn"

    @property
    def expected_count(self) -> int:
        """Number of pieces of this type one side starts with."""
        return _EXPECTED_COUNT[self]


_EXPECTED_COUNT: dict[PieceType, int] = {
    PieceType.KING: 1,
    PieceType.QUEEN: 1,
    PieceType.ROOK: 2,
    PieceType.BISHOP: 2,
    PieceType.KNIGHT: 2,
    PieceType.PAWN: 8,
}
