"""Issuer bound to one backend and sealing key."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, Optional, Union

from ..backends.base import SealingBackend
from ..config import TokenConfig
from ..errors import InvalidInputError
from ..utils.time import now_ms
from .service import seal_token
from .types import IssuedToken, Token


class TokenIssuer:
    """Issue compact sealed tokens that expire after a fixed lifetime."""

    def __init__(
        self,
        backend: SealingBackend,
        seal_key: Any,
        *,
        ttl_ms: Optional[int] = None,
        config: Optional[TokenConfig] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._backend = backend
        self._seal_key = seal_key
        self._clock = clock
        self.ttl_ms = ttl_ms if ttl_ms is not None else (config or TokenConfig()).default_ttl_ms

    def issue(
        self,
        payload: Optional[bytes] = None,
        *,
        associated_data: Optional[bytes] = None,
        lifetime: Optional[Union[timedelta, int]] = None,
        expires_at: Optional[Union[datetime, int]] = None,
    ) -> IssuedToken:
        if expires_at is not None and lifetime is not None:
            raise InvalidInputError("specify either lifetime or expires_at, not both")
        if expires_at is not None:
            token = Token.from_time(expires_at, payload)
        else:
            token = Token.from_duration(self.ttl_ms if lifetime is None else lifetime, payload, now=self._clock())
        wire = seal_token(self._backend, self._seal_key, token, associated_data)
        return IssuedToken(token=wire, expiration_timestamp=token.expiration_timestamp)

    def issue_text(self, payload: Optional[bytes] = None, **kwargs: Any) -> str:
        """Issue a token and return its URL-safe text form."""
        return self.issue(payload, **kwargs).text
