"""Time-related helper utilities.

Every helper here works in explicit UTC. The host's local timezone is never
consulted, so results are identical whatever ``TZ`` the process runs under.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

Instant = datetime | int | float

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class InvalidDateError(ValueError):
    """Raised when a value does not denote a representable point in time."""


def to_utc_instant(instant: Instant, *, assume_utc: bool = True) -> datetime:
    """Normalise ``instant`` to an aware ``datetime`` in UTC.

    ``instant`` is either a ``datetime`` or a number of milliseconds since the
    Unix epoch. Naive datetimes are read as UTC unless ``assume_utc`` is false,
    in which case they are rejected.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None or instant.utcoffset() is None:
            if not assume_utc:
                message = f"Naive datetime {instant.isoformat()} has no UTC offset."
                raise InvalidDateError(message)
            return instant.replace(tzinfo=timezone.utc)
        try:
            return instant.astimezone(timezone.utc)
        except OverflowError as exc:
            message = f"Datetime {instant.isoformat()} falls outside the representable UTC range."
            raise InvalidDateError(message) from exc

    # bool is an int subclass but never a timestamp
    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        message = f"Expected a datetime or epoch milliseconds, got {type(instant).__name__}."
        raise TypeError(message)

    if isinstance(instant, float) and not math.isfinite(instant):
        message = f"Epoch value {instant!r} is not a valid date."
        raise InvalidDateError(message)
    # sub-millisecond fractions are dropped toward zero, never rounded
    millis = math.trunc(instant)
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        message = f"Epoch value {instant!r} falls outside the representable date range."
        raise InvalidDateError(message) from exc


def format_utc_date(instant: Instant, *, assume_utc: bool = True) -> str:
    """Return the UTC calendar date of ``instant`` as ``YYYY-MM-DD``.

    The time of day is truncated, so ``2024-12-31T23:59:59.999Z`` stays on
    ``2024-12-31``.
    """
    moment = to_utc_instant(instant, assume_utc=assume_utc)
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def format_utc_timestamp(instant: Instant, *, assume_utc: bool = True) -> str:
    """Return ``instant`` as ``YYYY-MM-DDTHH:MM:SS.sssZ`` with millisecond precision."""
    moment = to_utc_instant(instant, assume_utc=assume_utc)
    millis = moment.microsecond // 1000
    return f"{format_utc_date(moment)}T{moment:%H:%M:%S}.{millis:03d}Z"


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def utc_today(now: Instant | None = None) -> str:
    """Return today's UTC date, or the UTC date of ``now`` when supplied."""
    return format_utc_date(utc_now() if now is None else now)


def utcnow_isoformat() -> str:
    """Return the current UTC timestamp in ISO-8601 format."""
    return utc_now().isoformat()
