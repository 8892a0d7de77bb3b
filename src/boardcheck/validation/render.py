"""Rendering of validation reports as text and as JSON-ready dicts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from boardcheck.validation.models import BoardValidationReport, SideValidationReport

NONE_MARKER = "none"

HEADER_VALID_STARTING = "Valid starting positions:"
HEADER_VALID_NON_STARTING = "Valid non-starting positions:"
HEADER_CONFLICTS = "Conflicting positions:"
HEADER_INVALID = "Invalid positions (not on board):"
HEADER_MISSING = "Missing pieces (regardless of positional validity):"
HEADER_EXTRA = "Extra pieces (regardless of positional validity):"


def _inline_list(descriptions: list[str]) -> str:
    if not descriptions:
        return NONE_MARKER
    return "[" + ", ".join(descriptions) + "]"


def _block(header: str, descriptions: Iterable[str]) -> list[str]:
    return [header, *(f"\t{d}" for d in descriptions)]


def render_side_lines(report: SideValidationReport) -> list[str]:
    """Render one side's sections in fixed output order."""
    lines = [f"{report.color.label.upper()} PIECES:"]
    lines += _block(
        HEADER_VALID_STARTING, (p.describe() for p in report.valid_starting)
    )
    lines += _block(
        HEADER_VALID_NON_STARTING, (p.describe() for p in report.valid_non_starting)
    )
    lines.append(
        f"{HEADER_CONFLICTS}\t{_inline_list([c.describe() for c in report.conflicts])}"
    )
    lines.append(
        f"{HEADER_INVALID}\t{_inline_list([i.describe() for i in report.invalid])}"
    )
    lines += _block(HEADER_MISSING, (d.describe() for d in report.missing))
    lines += _block(HEADER_EXTRA, (d.describe() for d in report.extra))
    return lines


def render_text(report: BoardValidationReport) -> str:
    """Render both sides, White first, as newline-terminated text."""
    lines: list[str] = []
    for side in report.sides:
        lines += render_side_lines(side)
    return "\n".join(lines) + "\n"


def side_to_dict(report: SideValidationReport) -> dict[str, Any]:
    return {
        "side": report.color.label,
        "valid_starting": [
            {"piece": p.piece, "square": p.square_name} for p in report.valid_starting
        ],
        "valid_non_starting": [
            {"piece": p.piece, "square": p.square_name}
            for p in report.valid_non_starting
        ],
        "conflicts": [
            {
                "piece": c.piece,
                "square": c.square_name,
                "kind": str(c.kind),
                "copies": c.copies,
            }
            for c in report.conflicts
        ],
        "invalid": [
            {"piece": i.piece, "square": i.square_token} for i in report.invalid
        ],
        "missing": {str(d.piece): d.missing for d in report.missing},
        "extra": {str(d.piece): d.extra for d in report.extra},
    }


def report_to_dict(report: BoardValidationReport) -> dict[str, Any]:
    """JSON-ready structure, sections in the same order as the text form."""
    return {
        "white": side_to_dict(report.white),
        "black": side_to_dict(report.black),
        "clean": report.is_clean,
    }
