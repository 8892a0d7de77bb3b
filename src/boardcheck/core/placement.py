"""Placement record value object and the single-line parser."""

from __future__ import annotations

from dataclasses import dataclass

from boardcheck.core.enums import Color
from boardcheck.core.types import Square, try_parse_square

_SEPARATOR = " "
_TOKEN_COUNT = 3


@dataclass(frozen=True, slots=True)
class PlacementRecord:
    """One asserted placement, e.g. ``White Rook A1``.

    ``square`` is ``None`` when ``square_token`` is not a board square;
    such records are reported as invalid and never counted.  ``side`` is
    ``None`` for an unrecognized side literal.
    """

    side: Color | None
    piece: str
    square_token: str
    square: Square | None

    @property
    def on_board(self) -> bool:
        return self.square is not None

    @property
    def key(self) -> tuple[Color | None, str, str]:
        """Canonical identity used everywhere a record is compared."""
        return (self.side, self.piece, self.square_token)

    def __str__(self) -> str:
        side = self.side.label if self.side is not None else "?"
        return f"{side} {self.piece} {self.square_token}"


def parse_placement(
    line: str, *, case_insensitive_squares: bool = False
) -> PlacementRecord | None:
    """Parse one raw line into a :class:`PlacementRecord`.

    Returns ``None`` for lines that do not split into exactly three
    single-space separated tokens.  Trailing empty tokens are ignored, so
    a trailing space does not make an otherwise good line malformed; an
    empty token anywhere else does.
    """
    tokens = line.rstrip("\r\n").split(_SEPARATOR)
    while tokens and not tokens[-1]:
        tokens.pop()
    if len(tokens) != _TOKEN_COUNT or not all(tokens):
        return None

    side_token, piece, square_token = tokens
    square = try_parse_square(square_token, ignore_case=case_insensitive_squares)
    if square is not None and case_insensitive_squares:
        square_token = square_token.upper()
    return PlacementRecord(
        side=Color.from_label(side_token),
        piece=piece,
        square_token=square_token,
        square=square,
    )
