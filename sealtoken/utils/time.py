"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MIN = datetime.min.replace(tzinfo=timezone.utc)
_MAX = datetime.max.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds since the Unix epoch."""
    return datetime_to_ms(utc_now())


def datetime_to_ms(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def ms_to_datetime(value: int) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime.

    Values beyond the range of ``datetime`` are clamped to its minimum or maximum.
    """
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except OverflowError:
        return _MAX if value > 0 else _MIN


def timedelta_to_ms(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)
