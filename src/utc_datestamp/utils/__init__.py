"""UTC date and timestamp helpers."""

from .time import (
    EPOCH,
    Instant,
    InvalidDateError,
    format_utc_date,
    format_utc_timestamp,
    to_utc_instant,
    utc_now,
    utc_today,
    utcnow_isoformat,
)

__all__ = [
    "EPOCH",
    "Instant",
    "InvalidDateError",
    "format_utc_date",
    "format_utc_timestamp",
    "to_utc_instant",
    "utc_now",
    "utc_today",
    "utcnow_isoformat",
]
