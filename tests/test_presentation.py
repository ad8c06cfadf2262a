from datetime import date

from modules.hangar_schedule.models import Booking, GridConfig, SlotKey, SlotStatus
from modules.hangar_schedule.presentation import ELLIPSIS, refresh, truncate_label
from modules.hangar_schedule.store import BookingStore

START = date(2024, 1, 1)


def _config():
    return GridConfig(hangar_count=2, day_count=3, start_date=START)


def test_truncate_long_description():
    text = "This description exceeds thirty characters for sure"
    label = truncate_label(text)
    assert len(label) == 30
    assert label == text[:29] + ELLIPSIS


def test_truncate_keeps_short_and_exact():
    assert truncate_label("Inspection") == "Inspection"
    assert truncate_label("x" * 30) == "x" * 30
    assert truncate_label(None) == ""


def test_refresh_covers_every_configured_slot():
    visuals = refresh(BookingStore(), None, _config())
    assert list(visuals) == [
        SlotKey(h, date(2024, 1, d)) for h in ("Hangar 1", "Hangar 2") for d in (1, 2, 3)
    ]
    assert all(v.status is SlotStatus.FREE and v.label == "" for v in visuals.values())


def test_refresh_marks_booked_blocked_and_selected():
    store = BookingStore()
    booked = SlotKey("Hangar 1", START)
    blocked = SlotKey("Hangar 2", date(2024, 1, 2))
    store.set(booked, Booking.reserved("Hangar 1", START, "Inspection"))
    store.set(blocked, Booking.blocked("Hangar 2", date(2024, 1, 2)))
    # bookings outside the grid are ignored
    store.set(SlotKey("Hangar 9", START), Booking.reserved("Hangar 9", START, "x"))

    visuals = refresh(store, booked, _config())
    assert len(visuals) == 6
    assert visuals[booked].status is SlotStatus.BOOKED
    assert visuals[booked].label == "Inspection"
    assert visuals[booked].selected
    assert visuals[blocked].blocked
    assert visuals[blocked].label == "Unavailable"
    assert not visuals[blocked].selected


def test_refresh_is_pure():
    store = BookingStore()
    store.set(SlotKey("Hangar 1", START), Booking.reserved("Hangar 1", START, "A"))
    selected = SlotKey("Hangar 2", START)
    assert refresh(store, selected, _config()) == refresh(store, selected, _config())
