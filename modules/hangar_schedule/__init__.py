"""Hangar schedule module."""

from __future__ import annotations

from typing import Optional

from .models import GridConfig
from .services import ScheduleService, ScheduleState

__all__ = [
    "create_schedule_window",
    "ScheduleService",
    "ScheduleState",
    "GridConfig",
]


def create_schedule_window(
    parent=None,
    *,
    config: Optional[GridConfig] = None,
    undo_depth: Optional[int] = None,
):
    """Factory for the hangar schedule window."""
    from .ui.schedule_window import ScheduleWindow

    if undo_depth is None:
        state = ScheduleState(config=config or GridConfig())
    else:
        state = ScheduleState(config=config or GridConfig(), undo_depth=undo_depth)
    service = ScheduleService(state)
    return ScheduleWindow(service, parent=parent)
