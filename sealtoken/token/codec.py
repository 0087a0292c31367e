"""Canonical plaintext layout of a token.

Layout: ``[8 bytes big-endian signed expiration ms][payload]``. The payload
length is implicit: it is whatever follows the timestamp, since AEAD opening
yields an exact-length plaintext.
"""

from __future__ import annotations

import struct

from ..errors import EncodingError, MalformedTokenError
from .types import TIMESTAMP_SIZE, Token

FORMAT_VERSION = 1

_TIMESTAMP = struct.Struct(">q")


def encode(token: Token) -> bytes:
    try:
        header = _TIMESTAMP.pack(token.expiration_timestamp)
    except struct.error as exc:
        raise EncodingError(f"cannot encode expiration timestamp: {exc}") from exc
    return header + bytes(token.payload)


def decode(data: bytes) -> Token:
    if len(data) < TIMESTAMP_SIZE:
        raise MalformedTokenError(f"plaintext is {len(data)} bytes, need at least {TIMESTAMP_SIZE}")
    (expiration,) = _TIMESTAMP.unpack_from(data)
    return Token(expiration_timestamp=expiration, payload=bytes(data[TIMESTAMP_SIZE:]))


def is_expired(token: Token, now: int) -> bool:
    return token.is_expired(now)
