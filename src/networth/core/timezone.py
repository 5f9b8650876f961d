"""UTC time helpers.

Balance dates are plain calendar dates; every instant derived from one is UTC midnight.
"""

from datetime import date, datetime

import pytz

UTC = pytz.utc
_EPOCH = UTC.localize(datetime(1970, 1, 1))


def now_utc() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)


def today_utc() -> date:
    """Return today's calendar date in UTC."""
    return now_utc().date()


def utc_midnight_ms(day: date) -> int:
    """Milliseconds since the epoch at UTC midnight of ``day``."""
    midnight = UTC.localize(datetime(day.year, day.month, day.day))
    return int((midnight - _EPOCH).total_seconds()) * 1000


def from_utc_ms(ms: int) -> datetime:
    """Convert epoch milliseconds back to an aware UTC datetime."""
    return datetime.fromtimestamp(ms / 1000, UTC)
