"""Permissive balance-date parsing.

Dates arrive typed by hand, exported from spreadsheets as ``M/D/Y`` and echoed back
in ISO form. Parsing never raises: an unreadable value is carried through as an
opaque string so one bad cell cannot sink a bulk import.
"""

from datetime import date, timedelta
from typing import NamedTuple, Optional

from networth.core.timezone import utc_midnight_ms


class DateParts(NamedTuple):
    """Year/month/day triple as written; not guaranteed to be a real calendar date."""

    year: int
    month: int
    day: int


def parse_date_parts(value: Optional[str]) -> Optional[DateParts]:
    """
    Split a date string into a year/month/day triple.

    ``M/D/Y`` when the string contains a slash, ``Y-M-D`` otherwise. Two-digit
    years are taken as 2000s. Returns None when fewer than three parts are present,
    a part is not an integer, or any component is zero.
    """
    if value is None:
        return None
    text = str(value).strip()
    slashed = "/" in text
    parts = text.split("/") if slashed else text.split("-")
    if len(parts) < 3:
        return None

    try:
        a, b, c = (int(p.strip()) for p in parts[:3])
    except ValueError:
        return None

    if slashed:
        month, day, year = a, b, c
    else:
        year, month, day = a, b, c

    if min(year, month, day) < 0:
        return None
    if year < 100:
        year += 2000
    if not year or not month or not day:
        return None
    return DateParts(year, month, day)


def canonicalize(value: Optional[str]) -> str:
    """Return ``YYYY-MM-DD`` for a parsable date, else the trimmed input unchanged."""
    parts = parse_date_parts(value)
    if parts is None:
        return "" if value is None else str(value).strip()
    return f"{parts.year}-{parts.month:02d}-{parts.day:02d}"


def to_calendar_date(value: Optional[str]) -> Optional[date]:
    """
    Resolve a date string to a calendar date.

    Out-of-range months and days roll forward the way a UTC calendar constructor
    does (month 13 of 2024 is January 2025).
    """
    parts = parse_date_parts(value)
    if parts is None:
        return None
    months = parts.year * 12 + (parts.month - 1)
    try:
        first = date(months // 12, months % 12 + 1, 1)
        return first + timedelta(days=parts.day - 1)
    except (ValueError, OverflowError):
        return None


def to_timestamp(value: Optional[str]) -> int:
    """Milliseconds since the epoch at UTC midnight of the date; 0 if unparsable."""
    day = to_calendar_date(value)
    if day is None:
        return 0
    return utc_midnight_ms(day)


def is_valid_date(value: Optional[str]) -> bool:
    """True when the value parses to a real calendar date without rolling over."""
    parts = parse_date_parts(value)
    if parts is None:
        return False
    try:
        date(parts.year, parts.month, parts.day)
    except ValueError:
        return False
    return True


def format_display(value: Optional[str]) -> str:
    """Render a date as ``M/D/YY``; unparsable input is returned unchanged."""
    parts = parse_date_parts(value)
    if parts is None:
        return "" if value is None else str(value)
    return f"{parts.month}/{parts.day}/{str(parts.year)[-2:]}"
