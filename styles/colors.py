from __future__ import annotations

"""Shared color constants used by the schedule grid."""

from typing import Dict

from PySide6.QtGui import QColor


def _ensure_qcolor(value: str | tuple[int, int, int] | QColor) -> QColor:
    if isinstance(value, QColor):
        return value
    if isinstance(value, tuple):
        return QColor(*value)
    return QColor(value)


_NAMED_COLORS = {
    "SLOT_FREE": "#90ee90",
    "SLOT_BOOKED": "#f08080",
    "SLOT_BLOCKED": "#d3d3d3",
    "SELECTED_BORDER": "#1f6feb",
    "HEADER_TEXT": "#24292f",
}

COLORS: Dict[str, QColor] = {
    key: _ensure_qcolor(value)
    for key, value in _NAMED_COLORS.items()
}

SLOT_FREE = COLORS["SLOT_FREE"]
SLOT_BOOKED = COLORS["SLOT_BOOKED"]
SLOT_BLOCKED = COLORS["SLOT_BLOCKED"]
SELECTED_BORDER = COLORS["SELECTED_BORDER"]
HEADER_TEXT = COLORS["HEADER_TEXT"]

__all__ = [
    "COLORS",
    "SLOT_FREE",
    "SLOT_BOOKED",
    "SLOT_BLOCKED",
    "SELECTED_BORDER",
    "HEADER_TEXT",
]
