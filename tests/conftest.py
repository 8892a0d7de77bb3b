"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from boardcheck.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


STARTING_LINES: list[str] = [
    "White Rook A1",
    "White Knight B1",
    "White Bishop C1",
    "White Queen D1",
    "White King E1",
    "White Bishop F1",
    "White Knight G1",
    "White Rook H1",
    *(f"White Pawn {f}2" for f in "ABCDEFGH"),
    "Black Rook A8",
    "Black Knight B8",
    "Black Bishop C8",
    "Black Queen D8",
    "Black King E8",
    "Black Bishop F8",
    "Black Knight G8",
    "Black Rook H8",
    *(f"Black Pawn {f}7" for f in "ABCDEFGH"),
]


@pytest.fixture
def starting_lines() -> list[str]:
    """Placement lines for a complete, correct starting layout."""
    return list(STARTING_LINES)
