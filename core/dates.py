"""Date-key parsing and section header labels.

Date keys are the journal's display dates (e.g. "10 June 2024"). Parsing is
best-effort and never raises; callers should expect `None` for sentinel keys
such as "Unknown Date".

The default key format always uses English month names, whatever the process
locale is (Qt applies the desktop locale on startup).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

DATE_KEY_FMT = "%d %B %Y"
UNKNOWN_DATE_KEY = "Unknown Date"

TODAY_LABEL = "Today"
YESTERDAY_LABEL = "Yesterday"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Full names and three-letter abbreviations, lowercased
_MONTHS: dict[str, int] = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    _MONTHS[_name.lower()] = _number
    _MONTHS[_name[:3].lower()] = _number


def _parse_day_month_year(value: str) -> date | None:
    parts = value.split()
    if len(parts) != 3:
        return None
    day, month_name, year = parts
    month = _MONTHS.get(month_name.lower())
    if month is None or not day.isdigit() or not year.isdigit():
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def parse_date_key(value: str | None, fmt: str = DATE_KEY_FMT) -> date | None:
    """Parse a date key using `fmt`; return None on failure."""
    if not value:
        return None
    if fmt == DATE_KEY_FMT:
        return _parse_day_month_year(value.strip())
    try:
        return datetime.strptime(value.strip(), fmt).date()
    except (ValueError, TypeError):
        return None


def section_label(date_key: str, today: date, fmt: str = DATE_KEY_FMT) -> str:
    """Return "Today", "Yesterday" or the literal key for a section header."""
    parsed = parse_date_key(date_key, fmt)
    if parsed is None:
        return date_key
    if parsed == today:
        return TODAY_LABEL
    if parsed == today - timedelta(days=1):
        return YESTERDAY_LABEL
    return date_key


def format_date_key(value: date, fmt: str = DATE_KEY_FMT) -> str:
    """Format a date as a date key."""
    if fmt == DATE_KEY_FMT:
        return f"{value.day:02d} {MONTH_NAMES[value.month - 1]} {value.year}"
    return value.strftime(fmt)
