"""In-memory booking store keyed by :class:`SlotKey`."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .models import Booking, SlotKey


class BookingStore:
    """Single source of truth for what is booked."""

    def __init__(self) -> None:
        self._bookings: Dict[SlotKey, Booking] = {}

    def get(self, key: SlotKey) -> Optional[Booking]:
        return self._bookings.get(key)

    def set(self, key: SlotKey, booking: Booking) -> None:
        self._bookings[key] = booking

    def remove(self, key: SlotKey) -> None:
        self._bookings.pop(key, None)

    def contains(self, key: SlotKey) -> bool:
        return key in self._bookings

    def all_keys(self) -> List[SlotKey]:
        return list(self._bookings)

    def clear(self) -> None:
        self._bookings.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._bookings

    def __len__(self) -> int:
        return len(self._bookings)

    def __iter__(self) -> Iterator[SlotKey]:
        return iter(list(self._bookings))


__all__ = ["BookingStore"]
