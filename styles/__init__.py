"""Colour constants for the schedule grid."""

from .colors import (
    COLORS,
    SLOT_FREE,
    SLOT_BOOKED,
    SLOT_BLOCKED,
    SELECTED_BORDER,
    HEADER_TEXT,
)

__all__ = [
    'COLORS',
    'SLOT_FREE',
    'SLOT_BOOKED',
    'SLOT_BLOCKED',
    'SELECTED_BORDER',
    'HEADER_TEXT',
]
