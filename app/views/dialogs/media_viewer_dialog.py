"""Full-screen style viewer stepping through the gallery's flattened sequence."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
from loguru import logger

from app.viewmodels.gallery_vm import GalleryVM
from app.viewmodels.media_vm import MediaVM
from app.views.constants import VIEWER_MIN_HEIGHT_PX, VIEWER_MIN_WIDTH_PX


class MediaViewerDialog(QDialog):
    """Shows `vm.current()` with previous/next/close controls."""

    def __init__(self, vm: GalleryVM, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self.setMinimumSize(VIEWER_MIN_WIDTH_PX, VIEWER_MIN_HEIGHT_PX)

        root = QVBoxLayout(self)
        self.media_label = QLabel("")
        self.media_label.setAlignment(Qt.AlignCenter)
        self.media_label.setWordWrap(True)
        self.media_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        root.addWidget(self.media_label, 1)

        self.details_label = QLabel("")
        self.details_label.setAlignment(Qt.AlignCenter)
        root.addWidget(self.details_label)

        btns = QHBoxLayout()
        self.btn_prev = QPushButton("◀")
        self.btn_next = QPushButton("▶")
        self.btn_close = QPushButton("Close")
        btns.addWidget(self.btn_prev)
        btns.addStretch(1)
        btns.addWidget(self.btn_close)
        btns.addStretch(1)
        btns.addWidget(self.btn_next)
        root.addLayout(btns)

        self.btn_prev.clicked.connect(lambda: self._vm.prev())
        self.btn_next.clicked.connect(lambda: self._vm.next())
        self.btn_close.clicked.connect(self.reject)
        self.finished.connect(self._on_finished)
        self._vm.add_listener(self.refresh)

    def refresh(self) -> None:
        """Render the current item, or close when there is none."""
        if not self._vm.is_viewer_open:
            if self.isVisible():
                self.reject()
            return
        current = self._vm.current()
        if current is None:
            logger.info("Viewer has no current item; closing")
            self._vm.close()
            return
        media = MediaVM(current)
        self.setWindowTitle(f"{media.kind_label}: {media.file_name}")
        self.media_label.setText(current.url)
        self.details_label.setText(f"{current.upload_date}  |  {media.tags_text}")

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Left:
            self._vm.prev()
            return
        if event.key() == Qt.Key_Right:
            self._vm.next()
            return
        super().keyPressEvent(event)

    def _on_finished(self, _result: int) -> None:
        self._vm.remove_listener(self.refresh)
        if self._vm.is_viewer_open:
            self._vm.close()
