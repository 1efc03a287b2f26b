"""Timeline pipeline: tag filtering, date grouping and row chunking.

Sections are a pure function of (items, query, row size). Every call builds
new objects; nothing produced here is patched in place afterwards.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from loguru import logger

from core.dates import DATE_KEY_FMT, parse_date_key
from core.models import MediaItem, Row, Section

DEFAULT_ROW_SIZE = 3


def filter_by_tag(items: Sequence[MediaItem], query: str) -> list[MediaItem]:
    """Return items with at least one tag containing `query` (case-insensitive).

    An empty query keeps every item in its original order.
    """
    if not query:
        return list(items)
    needle = query.lower()
    return [item for item in items if any(needle in tag.lower() for tag in item.tags)]


def group_by_date(
    items: Iterable[MediaItem], date_format: str = DATE_KEY_FMT
) -> list[tuple[str, list[MediaItem]]]:
    """Partition items by `upload_date`, most recent date first.

    Items keep their relative order inside each group. Keys that do not parse
    with `date_format` are placed after all dated groups, in first-seen order.
    """
    grouped: dict[str, list[MediaItem]] = defaultdict(list)
    for item in items:
        grouped[item.upload_date].append(item)

    def _sort_key(pair: tuple[str, list[MediaItem]]) -> tuple[int, int]:
        parsed = parse_date_key(pair[0], date_format)
        if parsed is None:
            return (1, 0)
        return (0, -parsed.toordinal())

    # sorted() is stable, so undated keys stay in first-seen order
    return sorted(grouped.items(), key=_sort_key)


def chunk_rows(items: Sequence[MediaItem], row_size: int) -> list[Row]:
    """Split `items` into rows of `row_size`; only the last row may be shorter."""
    return [tuple(items[i : i + row_size]) for i in range(0, len(items), row_size)]


class TimelineService:
    """Builds gallery sections from raw media items."""

    def __init__(self, row_size: int = DEFAULT_ROW_SIZE, date_format: str = DATE_KEY_FMT) -> None:
        """Create a TimelineService.

        Args:
            row_size: Items per grid row; must be at least 1.
            date_format: strptime format of the items' date keys.
        """
        if int(row_size) < 1:
            raise ValueError(f"row_size must be >= 1, got {row_size}")
        self.row_size = int(row_size)
        self.date_format = date_format

    def build(self, items: Sequence[MediaItem], query: str = "") -> list[Section]:
        """Filter, group and chunk `items` into ordered sections."""
        filtered = filter_by_tag(items, query)
        sections = [
            Section(date_key=key, rows=tuple(chunk_rows(group, self.row_size)))
            for key, group in group_by_date(filtered, self.date_format)
        ]
        logger.debug(
            "Timeline built: {} raw, {} filtered, {} sections (query={!r})",
            len(items),
            len(filtered),
            len(sections),
            query,
        )
        return sections
