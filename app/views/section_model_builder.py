from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtGui import QStandardItem, QStandardItemModel

from app.viewmodels.section_vm import SectionVM
from app.views.constants import (
    COLUMN_ROLE,
    FIRST_CELL_COL,
    MEDIA_ID_ROLE,
    ROW_ROLE,
    SECTION_ROLE,
    URL_ROLE,
)


def build_model(sections: Iterable[SectionVM], row_size: int) -> QStandardItemModel:
    """Builds the gallery tree model.

    One parent row per section (label in column 0) and one child row per grid
    row, with the row's media in columns 1..row_size. Cells carry their
    (section, row, column) coordinates so a click maps straight to the viewer.
    """
    model = QStandardItemModel()
    model.setHorizontalHeaderLabels(["Date"] + [""] * row_size)

    for section_index, section in enumerate(sections):
        header = QStandardItem(f"{section.label} ({section.item_count})")
        header.setEditable(False)
        header.setData(section_index, SECTION_ROLE)
        header_row = [header] + [QStandardItem("") for _ in range(row_size)]
        for it in header_row[1:]:
            it.setEditable(False)
        model.appendRow(header_row)

        for row_index, row in enumerate(section.rows):
            child_row = [QStandardItem("")]
            for column_index in range(row_size):
                cell = QStandardItem("")
                cell.setEditable(False)
                if column_index < len(row):
                    media = row[column_index]
                    cell.setText(f"[{media.kind_label}] {media.file_name}")
                    cell.setToolTip(media.tags_text)
                    cell.setData(media.item.id, MEDIA_ID_ROLE)
                    cell.setData(media.item.url, URL_ROLE)
                    cell.setData(section_index, SECTION_ROLE)
                    cell.setData(row_index, ROW_ROLE)
                    cell.setData(column_index, COLUMN_ROLE)
                child_row.append(cell)
            child_row[0].setEditable(False)
            header.appendRow(child_row)

    return model


def cell_coordinates(item: QStandardItem | None) -> tuple[int, int, int] | None:
    """Return (section, row, column) stored on a grid cell, or None."""
    if item is None or item.column() < FIRST_CELL_COL:
        return None
    section = item.data(SECTION_ROLE)
    row = item.data(ROW_ROLE)
    column = item.data(COLUMN_ROLE)
    if section is None or row is None or column is None:
        return None
    return int(section), int(row), int(column)
