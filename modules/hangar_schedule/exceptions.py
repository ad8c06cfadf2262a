"""Error taxonomy for the hangar schedule.

Every error here is recoverable: the window catches :class:`ScheduleError`
around each command and shows the message with a dialog matching
``severity``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ScheduleError(Exception):
    """Base class for user-facing schedule errors."""

    severity: Severity = Severity.ERROR
    title: str = "Schedule"

    def __init__(self, message: str, *, title: str | None = None, severity: Severity | None = None):
        super().__init__(message)
        self.message = message
        if title is not None:
            self.title = title
        if severity is not None:
            self.severity = severity


class InvalidKey(ScheduleError):
    """A slot key string could not be decoded."""

    severity = Severity.ERROR
    title = "Invalid Slot"


class ValidationFailed(ScheduleError):
    """User input was rejected before any mutation took place."""

    severity = Severity.WARNING
    title = "Validation"


class ConflictRequiresConfirmation(ScheduleError):
    """Raised when a handler needs a yes/no answer but has no way to ask."""

    severity = Severity.WARNING
    title = "Confirm"

    def __init__(self, message: str, keys: Iterable = (), **kwargs):
        super().__init__(message, **kwargs)
        self.keys: Tuple = tuple(keys)


class EmptyLog(ScheduleError):
    """Undo requested with nothing on the stack."""

    severity = Severity.INFO
    title = "Undo"


__all__ = [
    "Severity",
    "ScheduleError",
    "InvalidKey",
    "ValidationFailed",
    "ConflictRequiresConfirmation",
    "EmptyLog",
]
