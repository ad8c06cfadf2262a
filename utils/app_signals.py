from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class AppSignals(QObject):
    """Global Qt signals for app-wide events.

    Windows subscribe to these to keep the slot grid in sync with the
    booking store.
    """

    # Emitted after every booking mutation (including undo); provides the action label
    scheduleChanged = Signal(str)
    # Emitted when the selected slot changes; encoded slot key or "" when cleared
    selectionChanged = Signal(str)


# Global singleton instance
app_signals = AppSignals()


__all__ = ["app_signals", "AppSignals"]
