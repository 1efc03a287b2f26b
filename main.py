from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.gallery_vm import GalleryVM
from app.views.gallery_window import GalleryWindow
from core.services.timeline_service import TimelineService
from infrastructure.json_feed import JsonJournalFeed
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = init_logging(
        settings.path("logging.dir"), level=str(settings.get("logging.level", "INFO"))
    )
    logger.info("Logging to {}", log_dir)

    app = QApplication(sys.argv)

    timeline = TimelineService(
        row_size=settings.gallery_row_size(), date_format=settings.gallery_date_format()
    )
    vm = GalleryVM(timeline)

    feed_path = settings.path("feed.path", "samples/journals.json")
    owner_id = str(settings.get("feed.owner_id", "local"))
    feed = JsonJournalFeed(feed_path)

    with vm.subscribed(feed, owner_id):
        win = GalleryWindow(vm)
        win.resize(900, 700)
        win.show()
        return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
