"""Occupancy aggregation: per-side piece counts and square occupancy.

A tally only accumulates; nothing is classified until every record for a
run has been added.  Partial tallies built from separate partitions of the
input are combined with :meth:`BoardTally.merge` before any report is
derived from them.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from boardcheck.core.enums import Color
from boardcheck.core.placement import PlacementRecord, parse_placement
from boardcheck.core.types import Square


@dataclass(slots=True)
class SideTally:
    """Accumulated placements for one side.

    ``occupancy`` is a multiset per square so that the same piece type
    placed twice on one square stays distinguishable from a single
    placement.
    """

    color: Color
    observed: Counter[str] = field(default_factory=Counter)
    occupancy: dict[Square, Counter[str]] = field(default_factory=dict)
    invalid: set[tuple[Color | None, str, str]] = field(default_factory=set)

    def add(self, record: PlacementRecord) -> None:
        """Account for *record*, which must belong to this side."""
        if record.side != self.color:
            raise ValueError(
                f"Record for another side in {self.color.label} tally: {record!s}"
            )
        if record.square is None:
            # Off-board records are reported but never counted.
            self.invalid.add(record.key)
            return
        self.observed[record.piece] += 1
        self.occupancy.setdefault(record.square, Counter())[record.piece] += 1

    def merge(self, other: SideTally) -> SideTally:
        """Return a new tally combining this one with *other*."""
        if other.color != self.color:
            raise ValueError(
                f"Cannot merge {other.color.label} tally into {self.color.label} tally"
            )
        merged = SideTally(self.color)
        for tally in (self, other):
            merged.observed.update(tally.observed)
            for sq, occupants in tally.occupancy.items():
                merged.occupancy.setdefault(sq, Counter()).update(occupants)
            merged.invalid |= tally.invalid
        return merged


@dataclass(slots=True)
class BoardTally:
    """Both sides' tallies plus line-level bookkeeping for one run."""

    white: SideTally = field(default_factory=lambda: SideTally(Color.WHITE))
    black: SideTally = field(default_factory=lambda: SideTally(Color.BLACK))
    lines: int = 0
    malformed: int = 0
    unknown_side: int = 0

    def side(self, color: Color) -> SideTally:
        return self.white if color == Color.WHITE else self.black

    def add_line(self, line: str, *, case_insensitive_squares: bool = False) -> None:
        """Parse *line* and route it to its side, or count why it was dropped."""
        self.lines += 1
        record = parse_placement(
            line, case_insensitive_squares=case_insensitive_squares
        )
        if record is None:
            self.malformed += 1
            return
        if record.side is None:
            self.unknown_side += 1
            return
        self.side(record.side).add(record)

    def merge(self, other: BoardTally) -> BoardTally:
        return BoardTally(
            white=self.white.merge(other.white),
            black=self.black.merge(other.black),
            lines=self.lines + other.lines,
            malformed=self.malformed + other.malformed,
            unknown_side=self.unknown_side + other.unknown_side,
        )

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, case_insensitive_squares: bool = False
    ) -> BoardTally:
        tally = cls()
        for line in lines:
            tally.add_line(line, case_insensitive_squares=case_insensitive_squares)
        return tally
