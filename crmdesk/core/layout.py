"""Dashboard widget grid layout.

Pure functions over widget placements on a fixed-width grid. Nothing here
touches the database or the request; callers own the before/after layout
values and decide when to persist them.
"""

import json
from typing import Any, Dict, Iterable, NamedTuple, Set, Tuple

from loguru import logger
from pydantic import ValidationError

from ..schemas.dashboard import GRID_COLUMNS, WidgetPlacement

MAX_SCAN_ROWS = 100

Layout = Dict[str, WidgetPlacement]


class GridPosition(NamedTuple):
    """Top-left cell of a widget on the grid."""

    x: int
    y: int


class OccupancyGrid:
    """Set of occupied cells, rows growing lazily downward."""

    def __init__(self, columns: int = GRID_COLUMNS):
        self.columns = columns
        self._cells: Set[Tuple[int, int]] = set()

    def can_place(self, x: int, y: int, w: int, h: int) -> bool:
        if x < 0 or x + w > self.columns:
            return False
        for dy in range(h):
            for dx in range(w):
                if (y + dy, x + dx) in self._cells:
                    return False
        return True

    def occupy(self, x: int, y: int, w: int, h: int) -> None:
        for dy in range(h):
            for dx in range(w):
                self._cells.add((y + dy, x + dx))

    def first_fit(self, w: int, h: int) -> GridPosition | None:
        """Scan top to bottom, left to right for the first free w x h area.

        Args:
            w: Width in columns
            h: Height in rows

        Returns:
            The first fitting position, or None if nothing fits within
            MAX_SCAN_ROWS rows
        """
        for y in range(MAX_SCAN_ROWS):
            for x in range(self.columns - w + 1):
                if self.can_place(x, y, w, h):
                    return GridPosition(x, y)
        return None


def compact_layout(layout: Layout, visible_ids: Iterable[str]) -> Layout:
    """Re-place the visible widgets into a gapless grid.

    Widgets are processed in reading order of their current position
    (y, then x), ties keeping their order in visible_ids, and each one drops
    into the topmost, then leftmost, free slot left by the widgets placed
    before it. Widgets that are not visible, or visible but missing from the
    layout, are left out of the result.

    Args:
        layout: Current placements keyed by widget id
        visible_ids: Widget ids that stay on the dashboard

    Returns:
        A new layout; the input is not modified
    """
    # sorted() is stable, so equal positions follow the visible order
    items = sorted(
        ((key, layout[key]) for key in dict.fromkeys(visible_ids) if key in layout),
        key=lambda item: (item[1].y, item[1].x),
    )

    grid = OccupancyGrid()
    compacted: Layout = {}

    for key, placement in items:
        position = grid.first_fit(placement.w, placement.h)
        if position is None:
            position = GridPosition(0, len(compacted) * 2)
            logger.warning(
                f"No free slot for widget '{key}' within {MAX_SCAN_ROWS} rows, "
                f"falling back to row {position.y}"
            )
        grid.occupy(position.x, position.y, placement.w, placement.h)
        compacted[key] = WidgetPlacement(
            x=position.x, y=position.y, w=placement.w, h=placement.h
        )

    return compacted


def find_free_slot(layout: Layout, width: int, height: int) -> GridPosition:
    """Find where a new widget of the given size would go.

    Every entry of the layout counts as occupied, visible or not.
    """
    grid = OccupancyGrid()
    for placement in layout.values():
        right = min(placement.x + placement.w, GRID_COLUMNS)
        grid.occupy(placement.x, placement.y, right - placement.x, placement.h)

    position = grid.first_fit(width, height)
    if position is None:
        return GridPosition(0, len(layout) * 2)
    return position


def parse_layout(raw: Any) -> Layout:
    """Load a persisted layout, tolerating legacy and malformed values.

    A mapping is used as is and a string is decoded as JSON first. Anything
    else yields an empty layout. Entries that are not valid placements are
    skipped.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored dashboard layout is not valid JSON, ignoring it")
            return {}

    if not isinstance(raw, dict):
        return {}

    layout: Layout = {}
    for key, value in raw.items():
        try:
            layout[str(key)] = WidgetPlacement.model_validate(value)
        except ValidationError as e:
            logger.warning(f"Dropping malformed placement for widget '{key}': {e}")
    return layout


def dump_layout(layout: Layout) -> Dict[str, Dict[str, int]]:
    """Serialize a layout to a JSON-compatible dict."""
    return {key: placement.model_dump() for key, placement in layout.items()}
