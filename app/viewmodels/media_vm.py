"""Lightweight view model wrapper around `MediaItem`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import urlparse

from core.models import MediaItem


@dataclass
class MediaVM:
    """Expose convenient properties for bindings/templates."""

    item: MediaItem

    @property
    def file_name(self) -> str:
        """Last path segment of the media URL."""
        return PurePosixPath(urlparse(self.item.url).path).name or self.item.url

    @property
    def kind_label(self) -> str:
        """Either "Video" or "Image" for display."""
        return "Video" if self.item.is_video else "Image"

    @property
    def tags_text(self) -> str:
        """Tags sorted case-insensitively and joined for display."""
        return ", ".join(sorted(self.item.tags, key=str.lower))
