"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

# Column 0 carries the section label on parent rows; grid cells follow.
FIRST_CELL_COL: int = 1

# Data roles
MEDIA_ID_ROLE: int = Qt.UserRole  # MediaItem.id on grid cells
URL_ROLE: int = Qt.UserRole + 1
SECTION_ROLE: int = Qt.UserRole + 2  # section index on every item
ROW_ROLE: int = Qt.UserRole + 3  # row index within the section
COLUMN_ROLE: int = Qt.UserRole + 4  # column index within the row

# Texts
WINDOW_TITLE: str = "My Media"
SEARCH_PLACEHOLDER: str = "Search by tag..."
EMPTY_TEXT: str = "No media uploaded yet."
LOADING_TEXT: str = "Loading media..."
ERROR_TEXT: str = "Media unavailable: {}"

# Viewer defaults
VIEWER_MIN_WIDTH_PX: int = 640
VIEWER_MIN_HEIGHT_PX: int = 480
