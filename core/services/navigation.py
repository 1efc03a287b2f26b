"""Cursor over the flattened section/item sequence of the gallery.

All operations are total: stale or out-of-range coordinates are clamped or
resolve to "no current item", which the caller treats as "close the viewer".
"""

from __future__ import annotations

from loguru import logger

from core.models import Cursor, MediaItem
from core.services.section_index import SectionIndex


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class NavigationCursor:
    """Stateful pointer used by the full-screen media viewer.

    Boundaries saturate: `next()` on the last item of the last section and
    `prev()` on the first item of the first section do nothing.
    """

    def __init__(self, index: SectionIndex | None = None) -> None:
        self._index = index or SectionIndex()
        self._position: Cursor | None = None
        self._visible = False

    @property
    def index(self) -> SectionIndex:
        """Snapshot the cursor currently resolves against."""
        return self._index

    @property
    def position(self) -> Cursor | None:
        """Last position; retained after `close()`."""
        return self._position

    @property
    def is_open(self) -> bool:
        """True while the viewer is visible."""
        return self._visible

    def open(self, section_index: int, row_index: int, column_index: int, row_size: int) -> None:
        """Show the viewer at a grid cell, clamping to the current snapshot."""
        item_index = SectionIndex.flat_index_of(row_index, column_index, row_size)
        section_count = self._index.section_count
        if section_count == 0:
            self._position = Cursor(0, 0)
        else:
            section_index = _clamp(section_index, 0, section_count - 1)
            last_item = max(0, self._index.section_item_count(section_index) - 1)
            self._position = Cursor(section_index, _clamp(item_index, 0, last_item))
        self._visible = True
        logger.debug("Viewer opened at {}", self._position)

    def close(self) -> None:
        """Hide the viewer; the position is kept."""
        self._visible = False

    def next(self) -> bool:
        """Advance one item, crossing into the next section. Return True if moved."""
        if not self._visible or self._position is None:
            return False
        section_index, item_index = self._position.section_index, self._position.item_index
        if item_index < self._index.section_item_count(section_index) - 1:
            self._position = Cursor(section_index, item_index + 1)
            return True
        if section_index < self._index.section_count - 1:
            self._position = Cursor(section_index + 1, 0)
            return True
        return False

    def prev(self) -> bool:
        """Step back one item, crossing into the previous section. Return True if moved."""
        if not self._visible or self._position is None:
            return False
        section_index, item_index = self._position.section_index, self._position.item_index
        if item_index > 0:
            self._position = Cursor(section_index, item_index - 1)
            return True
        if section_index > 0:
            previous = section_index - 1
            self._position = Cursor(previous, max(0, self._index.section_item_count(previous) - 1))
            return True
        return False

    def current(self) -> MediaItem | None:
        """Item under the cursor in the live snapshot, or None if stale/empty."""
        if self._position is None:
            return None
        return self._index.flat_item_at(self._position.section_index, self._position.item_index)

    def rebind(self, index: SectionIndex) -> None:
        """Install a regenerated snapshot, following the current item by id.

        If the item is gone from the new snapshot the viewer is closed and the
        position cleared.
        """
        current = self.current()
        self._index = index
        if current is None:
            if self._visible:
                logger.info("Viewer closed: no current item after refresh")
            self._position = None
            self._visible = False
            return
        moved = index.locate(current.id)
        if moved is None:
            if self._visible:
                logger.info("Viewer closed: item {} no longer in gallery", current.id)
            self._position = None
            self._visible = False
            return
        self._position = moved
