"""Utility helpers for time and text encoding."""

from .encoding import b64url_decode, b64url_encode
from .time import datetime_to_ms, ms_to_datetime, now_ms, timedelta_to_ms, utc_now

__all__ = [
    "b64url_encode",
    "b64url_decode",
    "utc_now",
    "now_ms",
    "datetime_to_ms",
    "ms_to_datetime",
    "timedelta_to_ms",
]
