"""Read-only addressing over a sections snapshot.

Maps grid coordinates (section, row, column) and flattened per-section item
indices to media items. Out-of-range lookups return None or 0, never raise.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.models import Cursor, MediaItem, Section


class SectionIndex:
    """Addressing layer for one immutable list of sections."""

    def __init__(self, sections: Sequence[Section] = ()) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._flat: tuple[tuple[MediaItem, ...], ...] = tuple(
            tuple(section.items) for section in self._sections
        )

    @property
    def sections(self) -> tuple[Section, ...]:
        """The snapshot this index addresses."""
        return self._sections

    @property
    def section_count(self) -> int:
        """Number of sections."""
        return len(self._sections)

    @property
    def total_item_count(self) -> int:
        """Number of items across all sections."""
        return sum(len(flat) for flat in self._flat)

    @staticmethod
    def flat_index_of(row_index: int, column_index: int, row_size: int) -> int:
        """Map grid coordinates to the flattened item index within a section."""
        return row_index * row_size + column_index

    def item_at(self, section_index: int, row_index: int, column_index: int) -> MediaItem | None:
        """Return the item at (section, row, column), or None if out of range."""
        if not 0 <= section_index < len(self._sections):
            return None
        rows = self._sections[section_index].rows
        if not 0 <= row_index < len(rows):
            return None
        row = rows[row_index]
        if not 0 <= column_index < len(row):
            return None
        return row[column_index]

    def flat_item_at(self, section_index: int, item_index: int) -> MediaItem | None:
        """Return the item at a flattened position, or None if out of range."""
        if not 0 <= section_index < len(self._flat):
            return None
        flat = self._flat[section_index]
        if not 0 <= item_index < len(flat):
            return None
        return flat[item_index]

    def section_item_count(self, section_index: int) -> int:
        """Total items in a section (sum of row lengths); 0 if out of range."""
        if not 0 <= section_index < len(self._flat):
            return 0
        return len(self._flat[section_index])

    def locate(self, item_id: str) -> Cursor | None:
        """Return the first position holding an item with `item_id`."""
        for section_index, flat in enumerate(self._flat):
            for item_index, item in enumerate(flat):
                if item.id == item_id:
                    return Cursor(section_index, item_index)
        return None
