"""ViewModel for the media gallery: feed snapshots, tag query and viewer cursor."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import date

from loguru import logger

from app.viewmodels.media_vm import MediaVM
from app.viewmodels.section_vm import SectionVM
from core.dates import section_label
from core.models import FeedState, MediaItem, Section
from core.services.interfaces import IMediaFeed
from core.services.navigation import NavigationCursor
from core.services.section_index import SectionIndex
from core.services.timeline_service import TimelineService


class GalleryVM:
    """Gallery view-model.

    Holds the latest raw snapshot and query, rebuilds sections wholesale when
    either changes, and keeps the viewer cursor bound to the live sections.
    """

    def __init__(
        self,
        timeline: TimelineService | None = None,
        today_provider: Callable[[], date] | None = None,
    ) -> None:
        """Create a GalleryVM.

        Args:
            timeline: Section builder (defaults to `TimelineService()`).
            today_provider: Clock used for "Today"/"Yesterday" headers.
        """
        self._timeline = timeline or TimelineService()
        self._today = today_provider or date.today
        self._raw_items: list[MediaItem] = []
        self._query = ""
        self._index = SectionIndex()
        self._cursor = NavigationCursor(self._index)
        self._listeners: list[Callable[[], None]] = []
        self._subscription: Callable[[], None] | None = None
        self.state = FeedState.LOADING
        self.error_message: str | None = None

    # Inputs
    def set_items(self, items: Iterable[MediaItem]) -> None:
        """Replace the raw items with a new snapshot and rebuild sections."""
        self._raw_items = list(items)
        self.state = FeedState.READY
        self.error_message = None
        logger.info("Media snapshot received: {} items", len(self._raw_items))
        self._rebuild()

    def set_query(self, text: str) -> None:
        """Set the tag query; an empty string clears filtering."""
        text = text or ""
        if text == self._query:
            return
        self._query = text
        self._rebuild()

    def set_error(self, error: Exception) -> None:
        """Record a feed failure; the last good sections stay visible."""
        self.state = FeedState.ERROR
        self.error_message = str(error) or error.__class__.__name__
        logger.error("Media feed error: {}", self.error_message)
        self._notify()

    @property
    def query(self) -> str:
        return self._query

    @property
    def row_size(self) -> int:
        return self._timeline.row_size

    # Outputs
    @property
    def sections(self) -> tuple[Section, ...]:
        """Current sections snapshot."""
        return self._index.sections

    def get_sections(self) -> list[SectionVM]:
        """Sections with display labels relative to today."""
        today = self._today()
        return [
            SectionVM(
                date_key=section.date_key,
                label=section_label(section.date_key, today, self._timeline.date_format),
                rows=[[MediaVM(item) for item in row] for row in section.rows],
            )
            for section in self._index.sections
        ]

    @property
    def is_empty(self) -> bool:
        """True when the current sections hold no items."""
        return self._index.total_item_count == 0

    @property
    def is_viewer_open(self) -> bool:
        return self._cursor.is_open

    # Viewer navigation
    def open(self, section_index: int, row_index: int, column_index: int) -> None:
        self._cursor.open(section_index, row_index, column_index, self._timeline.row_size)
        self._notify()

    def close(self) -> None:
        self._cursor.close()
        self._notify()

    def next(self) -> bool:
        moved = self._cursor.next()
        if moved:
            self._notify()
        return moved

    def prev(self) -> bool:
        moved = self._cursor.prev()
        if moved:
            self._notify()
        return moved

    def current(self) -> MediaItem | None:
        return self._cursor.current()

    # Change notification
    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register `callback` to run after sections or viewer state change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # Feed subscription
    @contextmanager
    def subscribed(self, feed: IMediaFeed, owner_id: str) -> Iterator[GalleryVM]:
        """Keep a feed subscription open for the duration of the block.

        The subscription is released on exit, including on exceptions; any
        callbacks arriving afterwards are ignored.
        """
        active = True

        def _on_snapshot(items: list[MediaItem]) -> None:
            if not active:
                logger.debug("Dropping snapshot delivered after unsubscribe")
                return
            self.set_items(items)

        def _on_error(error: Exception) -> None:
            if not active:
                logger.debug("Dropping feed error delivered after unsubscribe: {}", error)
                return
            self.set_error(error)

        logger.info("Subscribing to media feed for owner {}", owner_id)
        self.state = FeedState.LOADING
        try:
            self._subscription = feed.subscribe(owner_id, _on_snapshot, _on_error)
        except Exception as ex:
            active = False
            self.set_error(ex)
            raise
        try:
            yield self
        finally:
            active = False
            unsubscribe, self._subscription = self._subscription, None
            if unsubscribe is not None:
                unsubscribe()
            logger.info("Media feed subscription released for owner {}", owner_id)

    @property
    def is_subscribed(self) -> bool:
        return self._subscription is not None

    def _rebuild(self) -> None:
        sections = self._timeline.build(self._raw_items, self._query)
        self._index = SectionIndex(sections)
        self._cursor.rebind(self._index)
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
