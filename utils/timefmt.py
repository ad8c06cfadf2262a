"""Utility helpers for rendering schedule dates in the UI."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def _coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion to a ``date``."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def header_label(value: Any, default: str = "—") -> str:
    """Short ``MM/DD`` label used in the grid's date header."""

    day = _coerce_date(value)
    if day is None:
        return default
    return day.strftime("%m/%d")


def choice_label(value: Any, default: str = "—") -> str:
    """``YYYY-MM-DD | Mon Jan 01`` label used in the booking dialog."""

    day = _coerce_date(value)
    if day is None:
        return default
    return f"{day.isoformat()} | {day.strftime('%a %b %d')}"


def parse_choice_label(text: str) -> Optional[date]:
    """Inverse of :func:`choice_label`; ``None`` when the text has no date."""

    if not text:
        return None
    return _coerce_date(text.split("|", 1)[0])


__all__ = ["header_label", "choice_label", "parse_choice_label"]
