"""Projection of the booking store onto the configured grid."""

from __future__ import annotations

from typing import Dict, Optional

from .models import GridConfig, SlotKey, SlotStatus, SlotVisual
from .store import BookingStore

LABEL_LIMIT = 30
ELLIPSIS = "…"


def truncate_label(text: Optional[str], limit: int = LABEL_LIMIT) -> str:
    """Cut ``text`` to ``limit`` displayed characters, ending in an ellipsis."""

    text = text or ""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + ELLIPSIS


def slot_visual(store: BookingStore, key: SlotKey, selected: Optional[SlotKey]) -> SlotVisual:
    booking = store.get(key)
    is_selected = selected is not None and key == selected
    if booking is None:
        return SlotVisual(status=SlotStatus.FREE, label="", selected=is_selected)
    return SlotVisual(
        status=SlotStatus.BOOKED,
        label=truncate_label(booking.display_text),
        selected=is_selected,
        blocked=booking.is_blocked,
    )


def refresh(
    store: BookingStore,
    selected: Optional[SlotKey],
    config: GridConfig,
) -> Dict[SlotKey, SlotVisual]:
    """Return the visual state of every configured slot, hangar then day."""

    return {key: slot_visual(store, key, selected) for key in config.keys()}


__all__ = ["LABEL_LIMIT", "ELLIPSIS", "truncate_label", "slot_visual", "refresh"]
