"""Domain models for the hangar schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import List, Tuple


BLOCKED_LABEL = "Unavailable"

DEFAULT_HANGAR_COUNT = 4
DEFAULT_DAY_COUNT = 7
MAX_HANGAR_COUNT = 200
MAX_DAY_COUNT = 365


class BookingKind(str, Enum):
    RESERVED = "reserved"
    BLOCKED = "blocked"


class SlotStatus(str, Enum):
    FREE = "free"
    BOOKED = "booked"


@dataclass(frozen=True, slots=True, order=True)
class SlotKey:
    """Identity of one (hangar, day) cell."""

    hangar: str
    day: date


@dataclass(frozen=True, slots=True)
class Booking:
    """One occupancy of a hangar on a day.

    A booking is either a reservation carrying free text or a maintenance
    block. Blocked bookings always display :data:`BLOCKED_LABEL`.
    """

    hangar: str
    day: date
    kind: BookingKind = BookingKind.RESERVED
    description: str = ""

    @classmethod
    def reserved(cls, hangar: str, day: date, description: str) -> "Booking":
        return cls(hangar=hangar, day=day, kind=BookingKind.RESERVED, description=description or "")

    @classmethod
    def blocked(cls, hangar: str, day: date) -> "Booking":
        return cls(hangar=hangar, day=day, kind=BookingKind.BLOCKED, description=BLOCKED_LABEL)

    @property
    def key(self) -> SlotKey:
        return SlotKey(self.hangar, self.day)

    @property
    def is_blocked(self) -> bool:
        return self.kind is BookingKind.BLOCKED

    @property
    def display_text(self) -> str:
        return BLOCKED_LABEL if self.is_blocked else self.description


def _clamp(value: int, upper: int) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        return 1
    return max(1, min(value, upper))


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Shape of the schedule grid: hangar rows by day columns."""

    hangar_count: int = DEFAULT_HANGAR_COUNT
    day_count: int = DEFAULT_DAY_COUNT
    start_date: date = field(default_factory=date.today)

    @classmethod
    def from_counts(cls, hangar_count, day_count, start_date: date | None = None) -> "GridConfig":
        """Build a config, clamping out-of-range counts into ``1..max``."""
        return cls(
            hangar_count=_clamp(hangar_count, MAX_HANGAR_COUNT),
            day_count=_clamp(day_count, MAX_DAY_COUNT),
            start_date=start_date or date.today(),
        )

    def hangar_names(self) -> List[str]:
        return [f"Hangar {i + 1}" for i in range(self.hangar_count)]

    def days(self) -> List[date]:
        return [self.start_date + timedelta(days=i) for i in range(self.day_count)]

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=self.day_count - 1)

    def has_hangar(self, hangar: str) -> bool:
        return hangar in self.hangar_names()

    def contains_day(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def contains(self, key: SlotKey) -> bool:
        return self.has_hangar(key.hangar) and self.contains_day(key.day)

    def keys(self) -> List[SlotKey]:
        days = self.days()
        return [SlotKey(hangar, day) for hangar in self.hangar_names() for day in days]


@dataclass(frozen=True, slots=True)
class SlotVisual:
    """Derived visual state of one grid cell."""

    status: SlotStatus = SlotStatus.FREE
    label: str = ""
    selected: bool = False
    blocked: bool = False


@dataclass(frozen=True, slots=True)
class ScheduleChange:
    """Description of a mutation a command handler performed."""

    label: str
    keys: Tuple[SlotKey, ...] = ()


__all__ = [
    "BLOCKED_LABEL",
    "DEFAULT_HANGAR_COUNT",
    "DEFAULT_DAY_COUNT",
    "MAX_HANGAR_COUNT",
    "MAX_DAY_COUNT",
    "BookingKind",
    "SlotStatus",
    "SlotKey",
    "Booking",
    "GridConfig",
    "SlotVisual",
    "ScheduleChange",
]
