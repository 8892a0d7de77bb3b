"""MainWindow: opens a placement file and shows both side reports."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QWidget,
)

from boardcheck.core.enums import Color
from boardcheck.ingest import read_placement_lines
from boardcheck.ui.i18n import LANGUAGES, set_language, t
from boardcheck.ui.panels.report_panel import ReportPanel
from boardcheck.validation import (
    BoardValidationReport,
    PlacementValidator,
    ValidatorSettings,
)

_LOGGER = logging.getLogger(__name__)


def _issue_count(report: BoardValidationReport) -> int:
    return sum(
        len(side.valid_non_starting)
        + len(side.conflicts)
        + len(side.invalid)
        + sum(d.missing for d in side.missing)
        + sum(d.extra for d in side.extra)
        for side in report.sides
    )


class MainWindow(QMainWindow):
    """Main application window for Boardcheck."""

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(720, 480)
        self.resize(960, 640)

        self._settings = settings or ValidatorSettings()
        self._language = "English"
        self._current_path: Path | None = None
        self._report: BoardValidationReport | None = None

        self._setup_ui()
        self._setup_menu()
        self.retranslate_ui()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._white_panel = ReportPanel(Color.WHITE)
        self._black_panel = ReportPanel(Color.BLACK)
        root.addWidget(self._white_panel, stretch=1)
        root.addWidget(self._black_panel, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_file = menu_bar.addMenu("")
        assert self._menu_file is not None

        self._act_open = QAction(self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open)
        self._menu_file.addAction(self._act_open)

        self._act_reload = QAction(self)
        self._act_reload.setShortcut("F5")
        self._act_reload.setEnabled(False)
        self._act_reload.triggered.connect(self.reload)
        self._menu_file.addAction(self._act_reload)

        self._menu_file.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_options = menu_bar.addMenu("")
        assert self._menu_options is not None

        self._act_ignore_case = QAction(self)
        self._act_ignore_case.setCheckable(True)
        self._act_ignore_case.setChecked(self._settings.case_insensitive_squares)
        self._act_ignore_case.toggled.connect(self.set_ignore_case)
        self._menu_options.addAction(self._act_ignore_case)

        self._menu_language = self._menu_options.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        for name in LANGUAGES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._language)
            act.triggered.connect(
                lambda _checked=False, lang=name: self.set_language(lang)
            )
            self._language_group.addAction(act)
            self._menu_language.addAction(act)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(
            s.window_title
            if self._current_path is None
            else f"{s.window_title} - {self._current_path.name}"
        )
        self._menu_file.setTitle(s.menu_file)
        self._act_open.setText(s.menu_open)
        self._act_reload.setText(s.menu_reload)
        self._act_quit.setText(s.menu_quit)
        self._menu_options.setTitle(s.menu_options)
        self._act_ignore_case.setText(s.menu_ignore_case)
        self._menu_language.setTitle(s.menu_language)
        self._white_panel.retranslate_ui()
        self._black_panel.retranslate_ui()
        self._update_status()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def report(self) -> BoardValidationReport | None:
        return self._report

    def load_file(self, path: Path) -> bool:
        """Validate *path* and show the result. Returns False on I/O failure."""
        try:
            lines = read_placement_lines([path])
        except OSError as exc:
            _LOGGER.warning("Cannot open %s: %s", path, exc)
            msg = t().status_open_failed.format(name=path.name, msg=exc)
            self._status_label.setText(msg)
            self._show_error(msg)
            return False

        self._current_path = path
        self._act_reload.setEnabled(True)
        self._show_report(PlacementValidator(self._settings).validate(lines))
        _LOGGER.info("Validated %d lines from %s", len(lines), path)
        self.retranslate_ui()
        self._status_label.setText(
            t().status_loaded.format(name=path.name, count=len(lines))
            + " · "
            + self._summary_text()
        )
        return True

    def reload(self) -> None:
        if self._current_path is not None:
            self.load_file(self._current_path)

    def set_ignore_case(self, enabled: bool) -> None:
        if self._settings.case_insensitive_squares == enabled:
            return
        self._settings.case_insensitive_squares = enabled
        if self._act_ignore_case.isChecked() != enabled:
            self._act_ignore_case.setChecked(enabled)
        self.reload()

    def set_language(self, language: str) -> None:
        self._language = language
        set_language(language)
        self.retranslate_ui()

    # ── Internals ────────────────────────────────────────────────────────

    def _on_open(self) -> None:
        s = t()
        file_name, _ = QFileDialog.getOpenFileName(
            self, s.open_dialog_title, "", s.open_dialog_filter
        )
        if file_name:
            self.load_file(Path(file_name))

    def _show_report(self, report: BoardValidationReport) -> None:
        self._report = report
        self._white_panel.set_report(report.white)
        self._black_panel.set_report(report.black)

    def _show_error(self, message: str) -> None:
        QMessageBox.warning(self, t().error_title, message)

    def _summary_text(self) -> str:
        if self._report is None:
            return t().status_ready
        if self._report.is_clean:
            return t().status_clean
        return t().status_issues.format(count=_issue_count(self._report))

    def _update_status(self) -> None:
        self._status_label.setText(self._summary_text())
