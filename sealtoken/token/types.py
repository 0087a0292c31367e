"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from ..errors import InvalidInputError, MalformedTokenError, TokenError
from ..utils.encoding import b64url_encode
from ..utils.time import datetime_to_ms, ms_to_datetime, now_ms, timedelta_to_ms

TIMESTAMP_SIZE = 8
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Lifetime = Union[timedelta, int]
Instant = Union[datetime, int]


def _coerce_payload(payload: object) -> bytes:
    if payload is None:
        return b""
    if isinstance(payload, (list, tuple)):
        raise InvalidInputError("payload must be specified at most once")
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InvalidInputError(f"payload must be bytes, not {type(payload).__name__}")
    return bytes(payload)


def _coerce_instant(instant: object) -> int:
    # bool is an int subclass but never a meaningful instant
    if isinstance(instant, datetime):
        value = datetime_to_ms(instant)
    elif isinstance(instant, int) and not isinstance(instant, bool):
        value = instant
    else:
        raise InvalidInputError(f"expiration must be a datetime or epoch milliseconds, not {type(instant).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidInputError("expiration does not fit in a signed 64-bit millisecond timestamp")
    return value


def _coerce_lifetime(lifetime: object) -> int:
    if isinstance(lifetime, timedelta):
        return timedelta_to_ms(lifetime)
    if isinstance(lifetime, int) and not isinstance(lifetime, bool):
        return lifetime
    raise InvalidInputError(f"lifetime must be a timedelta or milliseconds, not {type(lifetime).__name__}")


@dataclass(frozen=True)
class Token:
    """Logical token: an expiration instant in epoch milliseconds and an opaque payload."""

    expiration_timestamp: int
    payload: bytes = b""

    @classmethod
    def from_time(cls, instant: Instant, payload: Optional[bytes] = None) -> "Token":
        """Build a token expiring at ``instant``; past instants are allowed."""
        return cls(expiration_timestamp=_coerce_instant(instant), payload=_coerce_payload(payload))

    @classmethod
    def from_duration(
        cls,
        lifetime: Lifetime,
        payload: Optional[bytes] = None,
        *,
        now: Optional[int] = None,
    ) -> "Token":
        """Build a token expiring ``lifetime`` after ``now`` (defaults to the wall clock)."""
        start = now_ms() if now is None else now
        return cls.from_time(start + _coerce_lifetime(lifetime), payload)

    @property
    def expiration_time(self) -> datetime:
        return ms_to_datetime(self.expiration_timestamp)

    @property
    def plaintext_size(self) -> int:
        return TIMESTAMP_SIZE + len(self.payload)

    def is_expired(self, now: Optional[int] = None) -> bool:
        """Return True when ``now`` is at or past the expiration instant."""
        current = now_ms() if now is None else now
        return current >= self.expiration_timestamp


@dataclass(frozen=True)
class IssuedToken:
    token: bytes
    expiration_timestamp: int

    @property
    def text(self) -> str:
        return b64url_encode(self.token)


@dataclass(frozen=True)
class RedeemResult:
    """Outcome of one redeem call.

    An expired token is returned together with its ``ExpiredError`` so callers
    can inspect the payload; the error stays authoritative.
    """

    token: Optional[Token]
    error: Optional[TokenError] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> str:
        return "ok" if self.error is None else self.error.reason

    def unwrap(self) -> Token:
        """Return the token of a valid result, otherwise raise the recorded error."""
        if self.error is not None:
            raise self.error
        if self.token is None:
            raise MalformedTokenError("result holds no token")
        return self.token
