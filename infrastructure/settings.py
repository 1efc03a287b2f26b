"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.dates import DATE_KEY_FMT
from core.services.timeline_service import DEFAULT_ROW_SIZE


class JsonSettings:
    """JSON settings reader with dotted-key access.

    Relative paths inside the file are resolved against the file's folder.
    """

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def gallery_row_size(self) -> int:
        """Items per grid row; raises ValueError when below 1."""
        value = int(self.get("gallery.row_size", DEFAULT_ROW_SIZE))
        if value < 1:
            raise ValueError(f"gallery.row_size must be >= 1, got {value}")
        return value

    def gallery_date_format(self) -> str:
        return str(self.get("gallery.date_format", DATE_KEY_FMT))

    def path(self, key: str, default: str | None = None) -> Path | None:
        """Return a path setting resolved relative to the settings file."""
        raw = self.get(key, default)
        if not raw:
            return None
        p = Path(str(raw)).expanduser()
        return p if p.is_absolute() else self._path.parent / p
