"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    A1=0, B1=1, ..., H1=7
    A2=8, B2=9, ..., H2=15
    ...
    A8=56, B8=57, ..., H8=63

Square names are written the way placement records spell them: an
uppercase file letter followed by a rank digit.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

_FILES = "ABCDEFGH"
_RANKS = "12345678"


def file_of(sq: Square) -> int:
    """File index 0–7 (A–H)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Record-style name, e.g. 0 → 'A1', 63 → 'H8'."""
    return _FILES[file_of(sq)] + str(rank_of(sq) + 1)


def try_parse_square(token: str, *, ignore_case: bool = False) -> Square | None:
    """Parse a square token, returning ``None`` when it is not on the board.

    Matching is strict by default: ``"a1"`` is rejected unless
    *ignore_case* is set.
    """
    if ignore_case:
        token = token.upper()
    if len(token) != 2 or token[0] not in _FILES or token[1] not in _RANKS:
        return None
    return make_square(_FILES.index(token[0]), int(token[1]) - 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'E4' → 28."""
    sq = try_parse_square(name)
    if sq is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return sq


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
