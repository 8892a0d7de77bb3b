"""Application-wide Qt style sheet."""

from __future__ import annotations

ISSUE_COLOR = "#e68a2e"
OK_COLOR = "#9bc700"

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QTreeWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QTreeWidget::item:selected {
    background: #264f78;
}

QStatusBar {
    background: #252525;
    color: #c0c0c0;
}
"""
