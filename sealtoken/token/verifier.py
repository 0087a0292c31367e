"""Verifier bound to one backend and opening key."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..backends.base import SealingBackend
from ..errors import DecryptionError
from ..utils.encoding import b64url_decode
from ..utils.time import now_ms
from .service import redeem
from .types import RedeemResult


class TokenVerifier:
    """Open sealed tokens and check their expiry against the local clock."""

    def __init__(self, backend: SealingBackend, open_key: Any, *, clock: Callable[[], int] = now_ms) -> None:
        self._backend = backend
        self._open_key = open_key
        self._clock = clock

    def redeem(self, wire_token: bytes, *, associated_data: Optional[bytes] = None) -> RedeemResult:
        return redeem(self._backend, self._open_key, wire_token, associated_data, now_ms=self._clock())

    def redeem_text(self, text: str, *, associated_data: Optional[bytes] = None) -> RedeemResult:
        try:
            wire_token = b64url_decode(text)
        except DecryptionError as exc:
            return RedeemResult(token=None, error=exc)
        return self.redeem(wire_token, associated_data=associated_data)
