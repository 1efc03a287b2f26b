"""Core domain models for journal media items and timeline sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MEDIA_TYPES = frozenset({"image", "video"})

Row = tuple["MediaItem", ...]


@dataclass(frozen=True)
class MediaItem:
    """A single uploaded image or video attached to a journal entry."""

    id: str
    url: str
    type: str
    upload_date: str
    tags: frozenset[str] = field(default_factory=frozenset)
    # Lookup only; the journal entry is owned by the feed.
    journal_id: str = ""

    @property
    def is_video(self) -> bool:
        """True if the item is a video."""
        return self.type == "video"


@dataclass(frozen=True)
class Section:
    """Media items sharing one date key, split into grid rows."""

    date_key: str
    rows: tuple[Row, ...] = ()

    @property
    def items(self) -> list[MediaItem]:
        """Row concatenation in display order."""
        return [item for row in self.rows for item in row]

    @property
    def item_count(self) -> int:
        """Number of items across all rows."""
        return sum(len(row) for row in self.rows)


@dataclass(frozen=True)
class Cursor:
    """Position of the full-screen item: section plus flattened item index."""

    section_index: int
    item_index: int


class FeedState(Enum):
    """Availability of the media feed as seen by the gallery."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
