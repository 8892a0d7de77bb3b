"""Internationalisation strings for the boardcheck viewer.

Usage::

    from boardcheck.ui.i18n import t, set_language

    set_language("Russian")
    print(t().section_missing)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open: str
    menu_reload: str
    menu_quit: str
    menu_options: str
    menu_ignore_case: str
    menu_language: str

    status_ready: str
    status_loaded: str  # "Loaded {name}: {count} lines"
    status_clean: str
    status_issues: str  # "{count} issue(s) found"
    status_open_failed: str  # "Cannot open {name}: {msg}"

    open_dialog_title: str
    open_dialog_filter: str
    error_title: str

    # ── Report panel ─────────────────────────────────────────────────────
    header_white: str
    header_black: str
    section_valid_starting: str
    section_valid_non_starting: str
    section_conflicts: str
    section_invalid: str
    section_missing: str
    section_extra: str
    marker_none: str

    def side_header(self, is_white: bool) -> str:
        return self.header_white if is_white else self.header_black


_EN = Strings(
    window_title="Boardcheck",
    menu_file="&File",
    menu_open="&Open placements…",
    menu_reload="&Reload",
    menu_quit="&Quit",
    menu_options="&Options",
    menu_ignore_case="Accept lowercase squares",
    menu_language="Language",
    status_ready="Open a placement file to validate it.",
    status_loaded="Loaded {name}: {count} lines",
    status_clean="Both sides match the starting layout.",
    status_issues="{count} issue(s) found",
    status_open_failed="Cannot open {name}: {msg}",
    open_dialog_title="Open placement file",
    open_dialog_filter="Text files (*.txt);;All files (*)",
    error_title="Boardcheck",
    header_white="White pieces",
    header_black="Black pieces",
    section_valid_starting="Valid starting positions",
    section_valid_non_starting="Valid non-starting positions",
    section_conflicts="Conflicting positions",
    section_invalid="Invalid positions (not on board)",
    section_missing="Missing pieces",
    section_extra="Extra pieces",
    marker_none="none",
)

_RU = Strings(
    window_title="Boardcheck",
    menu_file="&Файл",
    menu_open="&Открыть расстановку…",
    menu_reload="&Перечитать",
    menu_quit="&Выход",
    menu_options="&Параметры",
    menu_ignore_case="Принимать поля в нижнем регистре",
    menu_language="Язык",
    status_ready="Откройте файл расстановки для проверки.",
    status_loaded="Загружен {name}: строк {count}",
    status_clean="Обе стороны совпадают с начальной расстановкой.",
    status_issues="Найдено проблем: {count}",
    status_open_failed="Не удалось открыть {name}: {msg}",
    open_dialog_title="Открыть файл расстановки",
    open_dialog_filter="Текстовые файлы (*.txt);;Все файлы (*)",
    error_title="Boardcheck",
    header_white="Белые фигуры",
    header_black="Чёрные фигуры",
    section_valid_starting="На начальных полях",
    section_valid_non_starting="Не на начальных полях",
    section_conflicts="Конфликтующие позиции",
    section_invalid="Недопустимые поля (вне доски)",
    section_missing="Недостающие фигуры",
    section_extra="Лишние фигуры",
    marker_none="нет",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

_current: Strings = _EN

LANGUAGES: list[str] = list(_LOCALES.keys())


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
