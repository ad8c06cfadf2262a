"""String form of a slot key, used on slot buttons and in log lines.

The date suffix is always exactly ten characters (``YYYY-MM-DD``), so the
hangar name is whatever precedes the separator in front of it. Hangar names
may contain the separator themselves.
"""

from __future__ import annotations

import re
from datetime import date

from .exceptions import InvalidKey
from .models import SlotKey

SEPARATOR = "-"
DATE_WIDTH = 10

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def encode(hangar: str, day: date) -> str:
    return f"{hangar}{SEPARATOR}{day.isoformat()}"


def encode_key(key: SlotKey) -> str:
    return encode(key.hangar, key.day)


def decode(key: str) -> SlotKey:
    if not key or len(key) < DATE_WIDTH + 1:
        raise InvalidKey(f"Invalid slot key: {key!r}")
    date_part = key[-DATE_WIDTH:]
    if key[-DATE_WIDTH - 1] != SEPARATOR:
        raise InvalidKey(f"Invalid slot key: {key!r}")
    if not _DATE_RE.fullmatch(date_part):
        raise InvalidKey(f"Invalid slot key date: {key!r}")
    try:
        day = date.fromisoformat(date_part)
    except ValueError as exc:
        raise InvalidKey(f"Invalid slot key date: {key!r}") from exc
    return SlotKey(key[: -DATE_WIDTH - 1], day)


__all__ = ["SEPARATOR", "encode", "encode_key", "decode"]
