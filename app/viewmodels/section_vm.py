from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from app.viewmodels.media_vm import MediaVM


@dataclass
class SectionVM:
    date_key: str
    label: str
    rows: List[List[MediaVM]] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return sum(len(row) for row in self.rows)
