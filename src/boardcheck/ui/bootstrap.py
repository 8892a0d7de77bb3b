"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from boardcheck.ui.styles.theme import APP_STYLE

    app.setApplicationName("Boardcheck")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the viewer; a file argument is opened on start."""
    from PyQt6.QtWidgets import QApplication

    from boardcheck.ui.main_window import MainWindow

    args = sys.argv if argv is None else argv
    app = QApplication(args)
    _configure_application(app)

    window = MainWindow()
    window.show()
    extra_args = app.arguments()[1:]
    if extra_args:
        _LOGGER.info("Opening %s from command line", extra_args[0])
        window.load_file(Path(extra_args[0]))

    return app.exec()
