"""Core utilities and shared functionality."""

from networth.core.timezone import (
    now_utc,
    today_utc,
    utc_midnight_ms,
    from_utc_ms,
    UTC,
)
from networth.core.dates import (
    DateParts,
    parse_date_parts,
    canonicalize,
    to_calendar_date,
    to_timestamp,
    is_valid_date,
    format_display,
)
from networth.core.batching import TaskOutcome, chunk, run_in_batches
from networth.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ParseError,
    ReconciliationError,
    ConstraintViolation,
    InvariantViolation,
)

__all__ = [
    "now_utc",
    "today_utc",
    "utc_midnight_ms",
    "from_utc_ms",
    "UTC",
    "DateParts",
    "parse_date_parts",
    "canonicalize",
    "to_calendar_date",
    "to_timestamp",
    "is_valid_date",
    "format_display",
    "TaskOutcome",
    "chunk",
    "run_in_batches",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ParseError",
    "ReconciliationError",
    "ConstraintViolation",
    "InvariantViolation",
]
