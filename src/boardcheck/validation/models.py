"""Data models produced by placement validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from boardcheck.core.enums import Color, PieceType
from boardcheck.core.types import Square, square_name


class ConflictKind(StrEnum):
    """Why a square is flagged as conflicting."""

    CONTESTED = "contested"  # different piece types share the square
    DUPLICATE = "duplicate"  # the same piece type was placed there twice or more


@dataclass(slots=True, frozen=True)
class Placement:
    """A single uncontested, on-board placement."""

    color: Color
    piece: str
    square: Square

    @property
    def square_name(self) -> str:
        return square_name(self.square)

    def describe(self) -> str:
        return f"{self.color.label} {self.piece} in [{self.square_name}]"


@dataclass(slots=True, frozen=True)
class Conflict:
    """A piece type involved in a same-side square conflict."""

    color: Color
    piece: str
    square: Square
    kind: ConflictKind
    copies: int = 1

    @property
    def square_name(self) -> str:
        return square_name(self.square)

    def describe(self) -> str:
        prefix = f"{self.color.label} {self.piece} in [{self.square_name}]"
        if self.kind == ConflictKind.DUPLICATE:
            return f"{prefix} placed {self.copies} times"
        return f"{prefix} at the same time"


@dataclass(slots=True, frozen=True)
class InvalidPlacement:
    """A placement whose square token is not on the board."""

    color: Color
    piece: str
    square_token: str

    def describe(self) -> str:
        return f"{self.color.label} {self.piece} at {self.square_token}"


@dataclass(slots=True, frozen=True)
class PieceCountDelta:
    """Expected minus observed count for one tracked piece type."""

    color: Color
    piece: PieceType
    delta: int

    @property
    def missing(self) -> int:
        return max(self.delta, 0)

    @property
    def extra(self) -> int:
        return max(-self.delta, 0)

    def describe(self) -> str:
        if self.delta < 0:
            return f"{self.extra} extra {self.color.label} {self.piece}"
        return f"{self.missing} missing {self.color.label} {self.piece}"


@dataclass(slots=True, frozen=True)
class SideValidationReport:
    """All report sections for one side, in output order."""

    color: Color
    valid_starting: tuple[Placement, ...]
    valid_non_starting: tuple[Placement, ...]
    conflicts: tuple[Conflict, ...]
    invalid: tuple[InvalidPlacement, ...]
    missing: tuple[PieceCountDelta, ...]
    extra: tuple[PieceCountDelta, ...]

    @property
    def is_clean(self) -> bool:
        """True when the side matches the starting layout exactly."""
        return not (
            self.valid_non_starting
            or self.conflicts
            or self.invalid
            or self.missing
            or self.extra
        )


@dataclass(slots=True, frozen=True)
class BoardValidationReport:
    """Reports for both sides from one validation run."""

    white: SideValidationReport
    black: SideValidationReport

    @property
    def sides(self) -> tuple[SideValidationReport, SideValidationReport]:
        return (self.white, self.black)

    def side(self, color: Color) -> SideValidationReport:
        return self.white if color == Color.WHITE else self.black

    @property
    def is_clean(self) -> bool:
        return self.white.is_clean and self.black.is_clean
