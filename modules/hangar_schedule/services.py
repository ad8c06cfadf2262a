"""Command handlers for the hangar schedule.

Each handler validates its input, snapshots every key it is about to touch
into the undo log, mutates the booking store once and returns a
:class:`ScheduleChange`. Validation failures raise before anything changes.

Handlers that may overwrite existing bookings take a ``confirm`` callback
(``confirm(message) -> bool``). Declining returns ``None`` and leaves the
store untouched. Without a callback the handler raises
:class:`ConflictRequiresConfirmation`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from .exceptions import ConflictRequiresConfirmation, ValidationFailed, Severity
from .models import MAX_DAY_COUNT, Booking, GridConfig, ScheduleChange, SlotKey, SlotVisual
from .presentation import refresh
from .slot_key import encode_key
from .store import BookingStore
from .undo import DEFAULT_UNDO_DEPTH, UndoLog

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


@dataclass
class ScheduleState:
    """Everything the command handlers read and mutate."""

    config: GridConfig = field(default_factory=GridConfig)
    undo_depth: int = DEFAULT_UNDO_DEPTH
    store: BookingStore = field(default_factory=BookingStore)
    selected: Optional[SlotKey] = None
    undo_log: UndoLog = field(init=False)

    def __post_init__(self) -> None:
        self.undo_log = UndoLog(self.store, self.undo_depth)


def date_range(start: date, end: date) -> List[date]:
    """Inclusive list of days from ``start`` to ``end``."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def _ask(confirm: Optional[Confirm], message: str, keys: Iterable[SlotKey] = ()) -> bool:
    if confirm is None:
        raise ConflictRequiresConfirmation(message, keys)
    return bool(confirm(message))


class ScheduleService:
    """High-level API consumed by the schedule window."""

    def __init__(self, state: Optional[ScheduleState] = None) -> None:
        self.state = state or ScheduleState()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def config(self) -> GridConfig:
        return self.state.config

    @property
    def store(self) -> BookingStore:
        return self.state.store

    @property
    def undo_log(self) -> UndoLog:
        return self.state.undo_log

    @property
    def selected(self) -> Optional[SlotKey]:
        return self.state.selected

    def hangar_names(self) -> List[str]:
        return self.config.hangar_names()

    def days(self) -> List[date]:
        return self.config.days()

    def booking_at(self, key: Optional[SlotKey]) -> Optional[Booking]:
        if key is None:
            return None
        return self.store.get(key)

    def can_undo(self) -> bool:
        return len(self.undo_log) > 0

    def visuals(self) -> Dict[SlotKey, SlotVisual]:
        return refresh(self.store, self.state.selected, self.config)

    # ------------------------------------------------------------------
    # Selection / configuration
    # ------------------------------------------------------------------
    def select(self, key: Optional[SlotKey]) -> None:
        if key is not None and not self.config.contains(key):
            raise ValidationFailed(f"{encode_key(key)} is not on the schedule.", title="Select")
        self.state.selected = key
        self._emit_selection()

    def reconfigure(self, config: GridConfig) -> None:
        """Rebuild the grid: bookings, undo history and selection are reset."""
        logger.info(
            "[schedule] reconfigure %d hangar(s) x %d day(s) from %s",
            config.hangar_count,
            config.day_count,
            config.start_date,
        )
        self.state.config = config
        self.store.clear()
        self.undo_log.clear()
        self.state.selected = None
        self._emit_selection()
        self._emit_changed("Reconfigure")

    # ------------------------------------------------------------------
    # Single-slot commands
    # ------------------------------------------------------------------
    def save_booking(
        self,
        hangar: str,
        day: date,
        description: str,
        confirm: Optional[Confirm] = None,
    ) -> Optional[ScheduleChange]:
        """Create or edit the booking at the selected slot.

        The booking may move to another hangar or day; the old slot is freed.
        """
        old_key = self.require_selection("Booking")
        self._require_hangar(hangar, "Booking")
        if not self.config.contains_day(day):
            raise ValidationFailed(f"{day.isoformat()} is outside the schedule window.", title="Booking")

        new_key = SlotKey(hangar, day)
        if new_key != old_key and new_key in self.store:
            if not _ask(confirm, "That slot is already booked. Overwrite?", [new_key]):
                logger.debug("[schedule] overwrite of %s declined", encode_key(new_key))
                return None

        label = "Edit booking" if old_key in self.store else "Add booking"
        self.undo_log.snapshot([old_key, new_key], label)
        self.store.set(new_key, Booking.reserved(hangar, day, description))
        if new_key != old_key and old_key in self.store:
            self.store.remove(old_key)
        self.state.selected = new_key
        change = ScheduleChange(label, tuple(dict.fromkeys([old_key, new_key])))
        self._finish(change)
        self._emit_selection()
        return change

    def delete_selected(self, confirm: Optional[Confirm] = None) -> Optional[ScheduleChange]:
        key = self.require_selection("Delete")
        if key not in self.store:
            raise ValidationFailed(
                "No booking exists in the selected slot.", title="Delete", severity=Severity.INFO
            )
        if not _ask(confirm, "Remove this booking?", [key]):
            return None
        label = "Delete booking"
        self.undo_log.snapshot([key], label)
        self.store.remove(key)
        self.state.selected = None
        change = ScheduleChange(label, (key,))
        self._finish(change)
        self._emit_selection()
        return change

    # ------------------------------------------------------------------
    # Range commands
    # ------------------------------------------------------------------
    def block_range(
        self,
        hangar: str,
        start: date,
        end: date,
        confirm: Optional[Confirm] = None,
    ) -> Optional[ScheduleChange]:
        """Mark ``hangar`` unavailable on every day from ``start`` to ``end``."""
        self._require_hangar(hangar, "Block")
        self._require_ordered(start, end, "Block")
        if (end - start).days + 1 > MAX_DAY_COUNT:
            raise ValidationFailed(f"A block may span at most {MAX_DAY_COUNT} days.", title="Block")
        keys = [SlotKey(hangar, day) for day in date_range(start, end)]
        if not self._confirm_overwrite(keys, confirm):
            return None
        label = f"Block {hangar} {start.isoformat()}..{end.isoformat()}"
        self.undo_log.snapshot(keys, label)
        for key in keys:
            self.store.set(key, Booking.blocked(key.hangar, key.day))
        change = ScheduleChange(label, tuple(keys))
        self._finish(change)
        return change

    def create_range(
        self,
        hangar: str,
        start: date,
        end: date,
        description: str,
        confirm: Optional[Confirm] = None,
    ) -> Optional[ScheduleChange]:
        """Book ``hangar`` with the same description across a day range."""
        self._require_hangar(hangar, "Multi-day Booking")
        text = (description or "").strip()
        if not text:
            raise ValidationFailed("A description is required.", title="Multi-day Booking")
        self._require_ordered(start, end, "Multi-day Booking")
        if not (self.config.contains_day(start) and self.config.contains_day(end)):
            raise ValidationFailed(
                "Dates must fall between "
                f"{self.config.start_date.isoformat()} and {self.config.end_date.isoformat()}.",
                title="Multi-day Booking",
            )
        keys = [SlotKey(hangar, day) for day in date_range(start, end)]
        if not self._confirm_overwrite(keys, confirm):
            return None
        label = f"Book {hangar} {start.isoformat()}..{end.isoformat()}"
        self.undo_log.snapshot(keys, label)
        for key in keys:
            self.store.set(key, Booking.reserved(key.hangar, key.day, text))
        change = ScheduleChange(label, tuple(keys))
        self._finish(change)
        return change

    # ------------------------------------------------------------------
    # Bulk removal
    # ------------------------------------------------------------------
    def clear_all(self, confirm: Optional[Confirm] = None) -> Optional[ScheduleChange]:
        keys = self.store.all_keys()
        if not keys:
            raise ValidationFailed("There are no bookings to clear.", title="Clear All", severity=Severity.INFO)
        if not _ask(confirm, f"Remove all {len(keys)} booking(s)?", keys):
            return None
        label = "Clear all"
        self.undo_log.snapshot(keys, label)
        self.store.clear()
        self.state.selected = None
        change = ScheduleChange(label, tuple(keys))
        self._finish(change)
        self._emit_selection()
        return change

    def clear_hangar(self, hangar: str, confirm: Optional[Confirm] = None) -> Optional[ScheduleChange]:
        self._require_hangar(hangar, "Clear Hangar")
        keys = [SlotKey(hangar, day) for day in self.days() if SlotKey(hangar, day) in self.store]
        if not keys:
            raise ValidationFailed(
                f"{hangar} has no bookings to clear.", title="Clear Hangar", severity=Severity.INFO
            )
        if not _ask(confirm, f"Remove {len(keys)} booking(s) from {hangar}?", keys):
            return None
        label = f"Clear {hangar}"
        self.undo_log.snapshot(keys, label)
        for key in keys:
            self.store.remove(key)
        if self.state.selected in keys:
            self.state.selected = None
            self._emit_selection()
        change = ScheduleChange(label, tuple(keys))
        self._finish(change)
        return change

    # ------------------------------------------------------------------
    # Undo
    # ------------------------------------------------------------------
    def undo(self) -> ScheduleChange:
        entry = self.undo_log.undo()
        change = ScheduleChange(f"Undo {entry.label}", tuple(entry.keys))
        self._finish(change)
        return change

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def require_selection(self, title: str) -> SlotKey:
        key = self.state.selected
        if key is None:
            logger.debug("[schedule] %s rejected: no selection", title)
            raise ValidationFailed("Please select a slot first.", title=title, severity=Severity.INFO)
        return key

    def _require_hangar(self, hangar: str, title: str) -> None:
        if not self.config.has_hangar(hangar):
            logger.debug("[schedule] %s rejected: unknown hangar %r", title, hangar)
            raise ValidationFailed(f"Unknown hangar: {hangar!r}.", title=title)

    def _require_ordered(self, start: date, end: date, title: str) -> None:
        if end < start:
            logger.debug("[schedule] %s rejected: %s after %s", title, start, end)
            raise ValidationFailed("End date must not be before the start date.", title=title)

    def _confirm_overwrite(self, keys: List[SlotKey], confirm: Optional[Confirm]) -> bool:
        conflicts = []
        for key in keys:
            existing = self.store.get(key)
            if existing is not None and not existing.is_blocked:
                conflicts.append(key)
        if not conflicts:
            return True
        message = f"{len(conflicts)} day(s) in the range already hold bookings. Overwrite?"
        return _ask(confirm, message, conflicts)

    def _finish(self, change: ScheduleChange) -> None:
        logger.info("[schedule] %s (%d slot(s))", change.label, len(change.keys))
        self._emit_changed(change.label)

    def _emit_changed(self, label: str) -> None:
        try:
            from utils.app_signals import app_signals

            app_signals.scheduleChanged.emit(label)
        except Exception as e:
            logger.warning("[schedule] failed to emit scheduleChanged: %s", e)

    def _emit_selection(self) -> None:
        selected = self.state.selected
        try:
            from utils.app_signals import app_signals

            app_signals.selectionChanged.emit(encode_key(selected) if selected else "")
        except Exception as e:
            logger.warning("[schedule] failed to emit selectionChanged: %s", e)


__all__ = ["Confirm", "ScheduleState", "ScheduleService", "date_range"]
