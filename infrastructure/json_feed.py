"""Local JSON journal feed.

Reads journal documents from a JSON file and pushes media snapshots to
subscribers. The file holds either a list of journal documents or an object
mapping owner id to such a list. Each document looks like::

    {"id": "j1", "date": "10 June 2024", "tags": ["beach"],
     "media": [{"id": "m1", "url": "https://...", "type": "image"}]}
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import json
from pathlib import Path
from typing import Any

from loguru import logger

from core.dates import UNKNOWN_DATE_KEY
from core.models import MEDIA_TYPES, MediaItem
from core.services.interfaces import ErrorCallback, SnapshotCallback, Unsubscribe


def _media_from_journal(journal: dict[str, Any]) -> Iterator[MediaItem]:
    """Yield media items of one journal document, inheriting its date and tags."""
    journal_id = str(journal.get("id", "") or "")
    upload_date = str(journal.get("date") or "").strip() or UNKNOWN_DATE_KEY
    raw_tags = journal.get("tags") or []
    tags = frozenset(str(t) for t in raw_tags if t) if isinstance(raw_tags, list) else frozenset()
    media = journal.get("media")
    if not isinstance(media, list):
        return

    for position, entry in enumerate(media):
        if not isinstance(entry, dict):
            logger.warning("Journal {} media #{} is not an object; skipped", journal_id, position)
            continue
        url = str(entry.get("url", "") or "")
        media_type = str(entry.get("type", "") or "").lower()
        if not url or media_type not in MEDIA_TYPES:
            logger.warning(
                "Journal {} media #{} skipped: url={!r} type={!r}",
                journal_id,
                position,
                url,
                media_type,
            )
            continue
        yield MediaItem(
            id=str(entry.get("id") or f"{journal_id}:{position}"),
            url=url,
            type=media_type,
            upload_date=upload_date,
            tags=tags,
            journal_id=journal_id,
        )


def extract_media(journals: Iterable[dict[str, Any]]) -> list[MediaItem]:
    """Flatten journal documents into media items in document order."""
    items: list[MediaItem] = []
    for journal in journals:
        if not isinstance(journal, dict):
            logger.warning("Journal document is not an object: {!r}", journal)
            continue
        items.extend(_media_from_journal(journal))
    return items


class JsonJournalFeed:
    """Media feed backed by a JSON file of journal documents."""

    def __init__(self, json_path: str | Path) -> None:
        self._path = Path(json_path)
        self._subscribers: dict[int, tuple[str, SnapshotCallback, ErrorCallback]] = {}
        self._next_token = 0

    def load(self, owner_id: str) -> list[MediaItem]:
        """Read the file and return the media items for `owner_id`.

        Raises:
            OSError: The file cannot be read.
            ValueError: The file is not valid JSON or has an unexpected shape.
        """
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            journals = data.get(owner_id, [])
        else:
            journals = data
        if not isinstance(journals, list):
            raise ValueError(f"Journals for owner {owner_id!r} must be a list")
        return extract_media(journals)

    def subscribe(
        self, owner_id: str, on_snapshot: SnapshotCallback, on_error: ErrorCallback
    ) -> Unsubscribe:
        """Deliver the current snapshot now and on every `reload()`."""
        token = self._next_token
        self._next_token += 1
        self._subscribers[token] = (owner_id, on_snapshot, on_error)
        self._push(owner_id, on_snapshot, on_error)

        def _unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return _unsubscribe

    def reload(self) -> None:
        """Re-read the file and push a fresh snapshot to every subscriber."""
        for owner_id, on_snapshot, on_error in list(self._subscribers.values()):
            self._push(owner_id, on_snapshot, on_error)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _push(self, owner_id: str, on_snapshot: SnapshotCallback, on_error: ErrorCallback) -> None:
        try:
            items = self.load(owner_id)
        except (OSError, ValueError) as ex:
            logger.error("Journal feed read failed for {}: {}", self._path, ex)
            on_error(ex)
            return
        on_snapshot(items)
