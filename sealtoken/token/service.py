"""Token issuance and redemption over an explicit sealing backend.

Issuance is ``compute expiry -> encode -> seal``; redemption is
``open -> decode -> check expiry``. Nothing is retained between calls.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Union

from ..backends.base import SealingBackend
from ..errors import AuthenticationError, DecryptionError, ExpiredError, MalformedTokenError
from ..utils.time import now_ms as wall_clock_ms
from .codec import decode, encode
from .types import Instant, Lifetime, RedeemResult, Token

logger = logging.getLogger(__name__)


def build_token(
    lifetime_or_instant: Union[Lifetime, Instant],
    payload: Optional[bytes] = None,
    *,
    now_ms: Optional[int] = None,
) -> Token:
    """A ``datetime`` is an absolute instant; a ``timedelta`` or int is a lifetime in ms."""
    if isinstance(lifetime_or_instant, datetime):
        return Token.from_time(lifetime_or_instant, payload)
    return Token.from_duration(lifetime_or_instant, payload, now=now_ms)


def seal_token(backend: SealingBackend, seal_key: Any, token: Token, associated_data: Optional[bytes] = None) -> bytes:
    wire = backend.seal(seal_key, encode(token), associated_data)
    logger.debug(
        "issued token backend=%s expires_at=%d size=%d",
        backend.name,
        token.expiration_timestamp,
        len(wire),
    )
    return wire


def issue(
    backend: SealingBackend,
    seal_key: Any,
    lifetime_or_instant: Union[Lifetime, Instant],
    payload: Optional[bytes] = None,
    associated_data: Optional[bytes] = None,
    *,
    now_ms: Optional[int] = None,
) -> bytes:
    """Build, encode and seal a token, returning the wire bytes.

    Invalid input raises ``InvalidInputError``; backend errors propagate unchanged.
    """
    token = build_token(lifetime_or_instant, payload, now_ms=now_ms)
    return seal_token(backend, seal_key, token, associated_data)


def redeem(
    backend: SealingBackend,
    open_key: Any,
    wire_token: bytes,
    associated_data: Optional[bytes] = None,
    *,
    now_ms: Optional[int] = None,
) -> RedeemResult:
    """Open, decode and expiry-check a wire token.

    Every outcome is returned, never raised: ``DecryptionError`` or
    ``MalformedTokenError`` without a token, ``ExpiredError`` with the decoded
    token, or the token alone when it is valid.
    """
    try:
        plaintext = backend.open(open_key, wire_token, associated_data)
    except AuthenticationError:
        logger.debug("rejected token backend=%s reason=%s", backend.name, DecryptionError.reason)
        return RedeemResult(token=None, error=DecryptionError())

    try:
        token = decode(plaintext)
    except MalformedTokenError as exc:
        logger.debug("rejected token backend=%s reason=%s", backend.name, exc.reason)
        return RedeemResult(token=None, error=exc)

    current = wall_clock_ms() if now_ms is None else now_ms
    if token.is_expired(current):
        logger.debug(
            "expired token backend=%s expires_at=%d now=%d",
            backend.name,
            token.expiration_timestamp,
            current,
        )
        return RedeemResult(token=token, error=ExpiredError())

    return RedeemResult(token=token)
