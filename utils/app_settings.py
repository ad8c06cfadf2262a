"""Application settings for the hangar schedule.

Values come from environment variables first, then from a config INI at
``$HANGAR_DATA_DIR/app.ini`` (``data/app.ini`` by default), then from the
built-in defaults. The INI may contain::

    [app]
    dev = true

    [schedule]
    hangars = 4
    days = 7
    undo_depth = 10

Unparseable or out-of-range values fall back to the defaults.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HANGARS = 4
DEFAULT_DAYS = 7
DEFAULT_UNDO_DEPTH = 10

_TRUE = {"1", "true", "yes", "on"}


def _data_dir() -> Path:
    return Path(os.environ.get("HANGAR_DATA_DIR", "data"))


def _read_ini() -> configparser.ConfigParser:
    cp = configparser.ConfigParser()
    ini_path = _data_dir() / "app.ini"
    if not ini_path.exists():
        return cp
    try:
        cp.read(ini_path)
    except configparser.Error as exc:
        logger.warning("[settings] ignoring unreadable %s: %s", ini_path, exc)
        return configparser.ConfigParser()
    return cp


def _positive_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("[settings] invalid integer %r, using %s", raw, default)
        return default
    if value < 1:
        logger.warning("[settings] value %s below 1, using %s", value, default)
        return default
    return value


def _lookup(cp: configparser.ConfigParser, env_name: str, section: str, option: str) -> Optional[str]:
    raw = os.environ.get(env_name)
    if raw is not None and raw.strip():
        return raw
    return cp.get(section, option, fallback=None)


@dataclass(frozen=True)
class ScheduleSettings:
    hangars: int = DEFAULT_HANGARS
    days: int = DEFAULT_DAYS
    undo_depth: int = DEFAULT_UNDO_DEPTH
    dev_mode: bool = False


def load_settings() -> ScheduleSettings:
    """Read settings from the environment and ``app.ini``."""

    cp = _read_ini()
    dev_raw = _lookup(cp, "HANGAR_SCHEDULE_DEV", "app", "dev") or "0"
    return ScheduleSettings(
        hangars=_positive_int(_lookup(cp, "HANGAR_SCHEDULE_HANGARS", "schedule", "hangars"), DEFAULT_HANGARS),
        days=_positive_int(_lookup(cp, "HANGAR_SCHEDULE_DAYS", "schedule", "days"), DEFAULT_DAYS),
        undo_depth=_positive_int(
            _lookup(cp, "HANGAR_SCHEDULE_UNDO_DEPTH", "schedule", "undo_depth"), DEFAULT_UNDO_DEPTH
        ),
        dev_mode=str(dev_raw).strip().lower() in _TRUE,
    )


__all__ = [
    "DEFAULT_HANGARS",
    "DEFAULT_DAYS",
    "DEFAULT_UNDO_DEPTH",
    "ScheduleSettings",
    "load_settings",
]
