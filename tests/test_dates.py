from __future__ import annotations

import unittest
from datetime import date
from unittest import mock

from core.dates import UNKNOWN_DATE_KEY, format_date_key, parse_date_key, section_label


class DateKeyTests(unittest.TestCase):
    def test_parses_day_month_year(self) -> None:
        self.assertEqual(parse_date_key("09 June 2024"), date(2024, 6, 9))
        self.assertEqual(parse_date_key(" 10 June 2024 "), date(2024, 6, 10))

    def test_invalid_keys_return_none(self) -> None:
        self.assertIsNone(parse_date_key(UNKNOWN_DATE_KEY))
        self.assertIsNone(parse_date_key(""))
        self.assertIsNone(parse_date_key(None))
        self.assertIsNone(parse_date_key("2024-06-10"))

    def test_format_matches_parse(self) -> None:
        self.assertEqual(format_date_key(date(2024, 6, 9)), "09 June 2024")

    def test_month_names_are_english_and_case_insensitive(self) -> None:
        self.assertEqual(parse_date_key("9 june 2024"), date(2024, 6, 9))
        self.assertEqual(parse_date_key("01 Sep 2023"), date(2023, 9, 1))
        self.assertIsNone(parse_date_key("10 Juni 2024"))
        self.assertIsNone(parse_date_key("31 February 2024"))

    def test_default_format_ignores_locale(self) -> None:
        with mock.patch("core.dates.datetime") as fake_datetime:
            fake_datetime.strptime.side_effect = ValueError("unknown month name")
            self.assertEqual(parse_date_key("10 June 2024"), date(2024, 6, 10))
            self.assertEqual(section_label("09 June 2024", date(2024, 6, 10)), "Yesterday")
            self.assertEqual(format_date_key(date(2024, 5, 1)), "01 May 2024")

    def test_custom_format_uses_strptime(self) -> None:
        self.assertEqual(parse_date_key("2024-06-10", "%Y-%m-%d"), date(2024, 6, 10))
        self.assertIsNone(parse_date_key("10 June 2024", "%Y-%m-%d"))


class SectionLabelTests(unittest.TestCase):
    today = date(2024, 6, 10)

    def test_today_and_yesterday(self) -> None:
        self.assertEqual(section_label("10 June 2024", self.today), "Today")
        self.assertEqual(section_label("09 June 2024", self.today), "Yesterday")

    def test_other_dates_use_literal_key(self) -> None:
        self.assertEqual(section_label("08 June 2024", self.today), "08 June 2024")
        self.assertEqual(section_label(UNKNOWN_DATE_KEY, self.today), UNKNOWN_DATE_KEY)

    def test_yesterday_across_month_boundary(self) -> None:
        self.assertEqual(section_label("31 May 2024", date(2024, 6, 1)), "Yesterday")


if __name__ == "__main__":
    unittest.main()
