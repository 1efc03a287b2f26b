from __future__ import annotations

import unittest
from unittest import mock

from core.dates import UNKNOWN_DATE_KEY
from core.models import MediaItem
from core.services.timeline_service import (
    TimelineService,
    chunk_rows,
    filter_by_tag,
    group_by_date,
)


def _item(item_id: str, upload_date: str = "10 June 2024", tags: tuple[str, ...] = ()) -> MediaItem:
    return MediaItem(
        id=item_id,
        url=f"https://media.example.com/{item_id}.jpg",
        type="image",
        upload_date=upload_date,
        tags=frozenset(tags),
        journal_id="j1",
    )


class TagFilterTests(unittest.TestCase):
    def test_empty_query_returns_input_unchanged(self) -> None:
        items = [_item("a"), _item("b", tags=("x",)), _item("c")]
        self.assertEqual(filter_by_tag(items, ""), items)

    def test_substring_match_is_case_insensitive(self) -> None:
        sunset = _item("a", tags=("Sunset View",))
        self.assertEqual(filter_by_tag([sunset], "sun"), [sunset])
        self.assertEqual(filter_by_tag([sunset], "VIEW"), [sunset])
        self.assertEqual(filter_by_tag([sunset], "moon"), [])

    def test_untagged_items_dropped_for_non_empty_query(self) -> None:
        items = [_item("a"), _item("b", tags=("beach",))]
        self.assertEqual([it.id for it in filter_by_tag(items, "b")], ["b"])

    def test_keeps_relative_order(self) -> None:
        items = [_item(str(n), tags=("trip",) if n % 2 else ("home",)) for n in range(6)]
        self.assertEqual([it.id for it in filter_by_tag(items, "trip")], ["1", "3", "5"])


class DateGroupingTests(unittest.TestCase):
    def test_groups_descending_by_date(self) -> None:
        items = [
            _item("a", "01 May 2024"),
            _item("b", "10 June 2024"),
            _item("c", "01 May 2024"),
            _item("d", "31 December 2023"),
        ]
        groups = group_by_date(items)
        self.assertEqual(
            [key for key, _ in groups], ["10 June 2024", "01 May 2024", "31 December 2023"]
        )
        self.assertEqual([it.id for it in groups[1][1]], ["a", "c"])

    def test_partition_covers_every_item_once(self) -> None:
        items = [_item(str(n), f"{n % 4 + 1:02d} March 2024") for n in range(11)]
        groups = group_by_date(items)
        flattened = sorted(it.id for _, group in groups for it in group)
        self.assertEqual(flattened, sorted(it.id for it in items))

    def test_unparseable_keys_pinned_last_in_first_seen_order(self) -> None:
        items = [
            _item("a", UNKNOWN_DATE_KEY),
            _item("b", "09 June 2024"),
            _item("c", "someday"),
            _item("d", "10 June 2024"),
        ]
        keys = [key for key, _ in group_by_date(items)]
        self.assertEqual(keys, ["10 June 2024", "09 June 2024", UNKNOWN_DATE_KEY, "someday"])

    def test_empty_input(self) -> None:
        self.assertEqual(group_by_date([]), [])

    def test_order_independent_of_locale_month_names(self) -> None:
        items = [_item("a", "01 May 2024"), _item("b", "10 June 2024"), _item("c", "09 June 2024")]
        # strptime with %B follows LC_TIME; a non-English desktop would reject "June"
        with mock.patch("core.dates.datetime") as fake_datetime:
            fake_datetime.strptime.side_effect = ValueError("unknown month name")
            keys = [key for key, _ in group_by_date(items)]
        self.assertEqual(keys, ["10 June 2024", "09 June 2024", "01 May 2024"])


class RowChunkerTests(unittest.TestCase):
    def test_rows_have_fixed_size_except_last(self) -> None:
        items = [_item(str(n)) for n in range(7)]
        rows = chunk_rows(items, 3)
        self.assertEqual([len(r) for r in rows], [3, 3, 1])
        self.assertEqual([it for r in rows for it in r], items)

    def test_exact_multiple_has_full_last_row(self) -> None:
        rows = chunk_rows([_item(str(n)) for n in range(6)], 3)
        self.assertEqual([len(r) for r in rows], [3, 3])

    def test_row_size_one_and_empty(self) -> None:
        self.assertEqual(len(chunk_rows([_item("a"), _item("b")], 1)), 2)
        self.assertEqual(chunk_rows([], 3), [])


class TimelineServiceTests(unittest.TestCase):
    def test_builds_sections_for_two_days(self) -> None:
        a = _item("a", "10 June 2024")
        b = _item("b", "10 June 2024")
        c = _item("c", "09 June 2024")
        sections = TimelineService(row_size=3).build([a, b, c])
        self.assertEqual([s.date_key for s in sections], ["10 June 2024", "09 June 2024"])
        self.assertEqual(sections[0].rows, ((a, b),))
        self.assertEqual(sections[1].rows, ((c,),))

    def test_query_applied_before_grouping(self) -> None:
        items = [
            _item("a", "10 June 2024", ("Sunset View",)),
            _item("b", "09 June 2024", ("hiking",)),
        ]
        sections = TimelineService().build(items, "sun")
        self.assertEqual([s.date_key for s in sections], ["10 June 2024"])

    def test_rejects_row_size_below_one(self) -> None:
        with self.assertRaises(ValueError):
            TimelineService(row_size=0)


if __name__ == "__main__":
    unittest.main()
