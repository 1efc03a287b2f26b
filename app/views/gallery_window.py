"""Gallery main window: tag search, date-sectioned grid and media viewer."""

from __future__ import annotations

from PySide6.QtCore import QModelIndex
from PySide6.QtGui import QStandardItemModel
from PySide6.QtWidgets import QLabel, QLineEdit, QMainWindow, QTreeView, QVBoxLayout, QWidget
from loguru import logger

from app.viewmodels.gallery_vm import GalleryVM
from app.views.constants import (
    EMPTY_TEXT,
    ERROR_TEXT,
    LOADING_TEXT,
    SEARCH_PLACEHOLDER,
    WINDOW_TITLE,
)
from app.views.dialogs.media_viewer_dialog import MediaViewerDialog
from app.views.section_model_builder import build_model, cell_coordinates
from core.models import FeedState, Section


class GalleryWindow(QMainWindow):
    """Main application window bound to a `GalleryVM`."""

    def __init__(self, vm: GalleryVM) -> None:
        super().__init__()
        self._vm = vm
        self._viewer: MediaViewerDialog | None = None
        self._shown_sections: tuple[Section, ...] | None = None
        self._model: QStandardItemModel | None = None
        self.setWindowTitle(WINDOW_TITLE)

        central = QWidget(self)
        root = QVBoxLayout(central)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.search_edit.setClearButtonEnabled(True)
        root.addWidget(self.search_edit)

        self.status_label = QLabel("")
        root.addWidget(self.status_label)

        self.tree = QTreeView()
        self.tree.setUniformRowHeights(True)
        self.tree.setRootIsDecorated(False)
        root.addWidget(self.tree, 1)

        self.setCentralWidget(central)

        self.search_edit.textChanged.connect(self._vm.set_query)
        self.tree.activated.connect(self._on_activated)
        self._vm.add_listener(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the tree model when sections change."""
        if self._vm.sections is not self._shown_sections or self._model is None:
            self._shown_sections = self._vm.sections
            self._model = build_model(self._vm.get_sections(), self._vm.row_size)
            self.tree.setModel(self._model)
            self.tree.expandAll()
        self._update_status()

    def _update_status(self) -> None:
        state = self._vm.state
        if state is FeedState.LOADING:
            text = LOADING_TEXT
        elif state is FeedState.ERROR:
            text = ERROR_TEXT.format(self._vm.error_message)
        elif self._vm.is_empty:
            text = EMPTY_TEXT
        else:
            text = ""
        self.status_label.setText(text)
        self.status_label.setVisible(bool(text))

    def _on_activated(self, index: QModelIndex) -> None:
        item = self._model.itemFromIndex(index) if self._model is not None else None
        coords = cell_coordinates(item)
        if coords is None:
            return
        section_index, row_index, column_index = coords
        logger.info("Open viewer at section={} row={} column={}", *coords)
        self._vm.open(section_index, row_index, column_index)
        if self._viewer is None or not self._viewer.isVisible():
            self._viewer = MediaViewerDialog(self._vm, self)
            self._viewer.show()
        self._viewer.refresh()

    def closeEvent(self, event) -> None:
        self._vm.remove_listener(self.refresh)
        if self._viewer is not None:
            self._viewer.close()
        super().closeEvent(event)
