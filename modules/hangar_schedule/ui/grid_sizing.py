"""Fill-versus-scroll sizing rules for the slot grid.

When the grid at its natural size fits the viewport, date columns and hangar
rows stretch to fill it. Otherwise they take fixed sizes and the surrounding
scroll area scrolls.
"""

from __future__ import annotations

from dataclasses import dataclass

HANGAR_COLUMN_WIDTH = 120
DAY_COLUMN_WIDTH = 120
HEADER_HEIGHT = 30
HANGAR_ROW_HEIGHT = 120


@dataclass(frozen=True, slots=True)
class GridSizing:
    stretch_columns: bool
    stretch_rows: bool
    natural_width: int
    natural_height: int


def natural_size(hangar_count: int, day_count: int) -> tuple[int, int]:
    width = HANGAR_COLUMN_WIDTH + day_count * DAY_COLUMN_WIDTH
    height = HEADER_HEIGHT + hangar_count * HANGAR_ROW_HEIGHT
    return width, height


def compute_sizing(viewport_width: int, viewport_height: int, hangar_count: int, day_count: int) -> GridSizing:
    panel_width = max(1, viewport_width)
    panel_height = max(1, viewport_height)
    width, height = natural_size(hangar_count, day_count)
    return GridSizing(
        stretch_columns=width <= panel_width,
        stretch_rows=height <= panel_height,
        natural_width=width,
        natural_height=height,
    )


__all__ = [
    "HANGAR_COLUMN_WIDTH",
    "DAY_COLUMN_WIDTH",
    "HEADER_HEIGHT",
    "HANGAR_ROW_HEIGHT",
    "GridSizing",
    "natural_size",
    "compute_sizing",
]
