"""Bounded undo stack of pre-mutation snapshots."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, List, Optional, Union

from .exceptions import EmptyLog
from .models import Booking, SlotKey
from .store import BookingStore

logger = logging.getLogger(__name__)

DEFAULT_UNDO_DEPTH = 10


class _Absent:
    """Marks a key that held no booking when the snapshot was taken."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

SnapshotValue = Union[Booking, _Absent]


@dataclass(slots=True)
class UndoEntry:
    label: str
    values: Dict[SlotKey, SnapshotValue] = field(default_factory=dict)

    @property
    def keys(self) -> List[SlotKey]:
        return list(self.values)


class UndoLog:
    """Stack of :class:`UndoEntry` bounded to the ``depth`` most recent.

    ``snapshot`` must be called before the store is mutated and must cover
    every key the mutation touches. ``undo`` restores those keys and nothing
    else; there is no redo.
    """

    def __init__(self, store: BookingStore, depth: int = DEFAULT_UNDO_DEPTH) -> None:
        self.store = store
        self.depth = max(1, int(depth))
        self._entries: Deque[UndoEntry] = deque(maxlen=self.depth)

    def snapshot(self, keys: Iterable[SlotKey], label: str) -> UndoEntry:
        values: Dict[SlotKey, SnapshotValue] = {}
        for key in keys:
            if key in values:
                continue
            current = self.store.get(key)
            values[key] = current if current is not None else ABSENT
        entry = UndoEntry(label=label, values=values)
        if len(self._entries) == self.depth:
            logger.debug("[undo] evicting oldest entry %r", self._entries[0].label)
        self._entries.append(entry)
        return entry

    def undo(self) -> UndoEntry:
        if not self._entries:
            raise EmptyLog("Nothing to undo.")
        entry = self._entries.pop()
        for key, value in entry.values.items():
            if value is ABSENT:
                self.store.remove(key)
            else:
                self.store.set(key, value)
        logger.debug("[undo] restored %d key(s) for %r", len(entry.values), entry.label)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def peek_label(self) -> Optional[str]:
        return self._entries[-1].label if self._entries else None

    def labels(self) -> List[str]:
        """Labels newest first."""
        return [entry.label for entry in reversed(self._entries)]

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ABSENT", "DEFAULT_UNDO_DEPTH", "UndoEntry", "UndoLog"]
