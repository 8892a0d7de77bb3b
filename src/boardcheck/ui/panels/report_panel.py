"""ReportPanel: tree view of one side's validation report."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import QLabel, QTreeWidget, QTreeWidgetItem, QVBoxLayout, QWidget

from boardcheck.core.enums import Color
from boardcheck.ui.i18n import Strings, t
from boardcheck.ui.styles.theme import ISSUE_COLOR, OK_COLOR
from boardcheck.validation.models import SideValidationReport


def _section_rows(
    report: SideValidationReport, s: Strings
) -> list[tuple[str, list[str], bool]]:
    """(title, entries, is_issue_section) in report order."""
    return [
        (
            s.section_valid_starting,
            [p.describe() for p in report.valid_starting],
            False,
        ),
        (
            s.section_valid_non_starting,
            [p.describe() for p in report.valid_non_starting],
            False,
        ),
        (s.section_conflicts, [c.describe() for c in report.conflicts], True),
        (s.section_invalid, [i.describe() for i in report.invalid], True),
        (s.section_missing, [d.describe() for d in report.missing], True),
        (s.section_extra, [d.describe() for d in report.extra], True),
    ]


class ReportPanel(QWidget):
    """Displays the report sections for a single side."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = color
        self._report: SideValidationReport | None = None
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._tree = QTreeWidget()
        self._tree.setHeaderHidden(True)
        self._tree.setAlternatingRowColors(True)
        self._tree.setSelectionMode(QTreeWidget.SelectionMode.NoSelection)
        layout.addWidget(self._tree)

    @property
    def color(self) -> Color:
        return self._color

    def retranslate_ui(self) -> None:
        self._header.setText(t().side_header(self._color == Color.WHITE))
        self._rebuild()

    def set_report(self, report: SideValidationReport | None) -> None:
        if report is not None and report.color != self._color:
            raise ValueError(
                f"{report.color.label} report given to {self._color.label} panel"
            )
        self._report = report
        self._rebuild()

    def clear(self) -> None:
        self.set_report(None)

    def _rebuild(self) -> None:
        self._tree.clear()
        if self._report is None:
            return
        s = t()
        for title, entries, is_issue in _section_rows(self._report, s):
            section = QTreeWidgetItem([f"{title} ({len(entries)})"])
            font = section.font(0)
            font.setBold(True)
            section.setFont(0, font)
            if is_issue:
                color = ISSUE_COLOR if entries else OK_COLOR
                section.setForeground(0, QBrush(QColor(color)))
            for entry in entries or [s.marker_none]:
                section.addChild(QTreeWidgetItem([entry]))
            self._tree.addTopLevelItem(section)
            section.setExpanded(bool(entries))
