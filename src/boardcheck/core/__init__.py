"""Core domain layer: sides, pieces, squares and the starting layout.

Quick start::

    from boardcheck.core import STANDARD_LAYOUT, Color, parse_placement

    record = parse_placement("White Rook A1")
    STANDARD_LAYOUT.is_starting_square(Color.WHITE, record.piece, record.square)
"""

from boardcheck.core.enums import Color, PieceType
from boardcheck.core.layout import STANDARD_LAYOUT, StartingLayout
from boardcheck.core.placement import PlacementRecord, parse_placement
from boardcheck.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
    try_parse_square,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "try_parse_square",
    # Domain objects
    "PlacementRecord",
    "STANDARD_LAYOUT",
    "StartingLayout",
    "parse_placement",
]
