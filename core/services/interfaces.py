"""Core service interfaces shared across the infrastructure and UI layers.

The media feed is an external collaborator: it pushes full-replacement
snapshots of media items for one owner and reports failures separately from
empty results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from core.models import MediaItem

SnapshotCallback = Callable[[list[MediaItem]], None]
ErrorCallback = Callable[[Exception], None]
Unsubscribe = Callable[[], None]


class IMediaFeed(Protocol):
    """Subscription source of media snapshots keyed by owner identity."""

    def subscribe(
        self, owner_id: str, on_snapshot: SnapshotCallback, on_error: ErrorCallback
    ) -> Unsubscribe:
        """Start delivering snapshots for `owner_id`.

        Returns:
            A callable that releases the subscription. Calling it more than
            once must be harmless.
        """
        raise NotImplementedError
