"""Placement validation APIs."""

from boardcheck.validation.models import (
    BoardValidationReport,
    Conflict,
    ConflictKind,
    InvalidPlacement,
    PieceCountDelta,
    Placement,
    SideValidationReport,
)
from boardcheck.validation.render import render_text, report_to_dict
from boardcheck.validation.service import (
    PlacementValidator,
    ValidatorSettings,
    build_side_report,
    count_deltas,
    detect_conflicts,
)
from boardcheck.validation.tally import BoardTally, SideTally

__all__ = [
    "BoardTally",
    "BoardValidationReport",
    "Conflict",
    "ConflictKind",
    "InvalidPlacement",
    "PieceCountDelta",
    "Placement",
    "PlacementValidator",
    "SideTally",
    "SideValidationReport",
    "ValidatorSettings",
    "build_side_report",
    "count_deltas",
    "detect_conflicts",
    "render_text",
    "report_to_dict",
]
