"""Configuration for token issuers and verifiers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .backends.base import SealingBackend
from .backends.registry import get_backend
from .errors import InvalidInputError

DEFAULT_TTL_MS = 30_000
DEFAULT_BACKEND = "chacha20poly1305"


@dataclass(frozen=True)
class TokenConfig:
    """Default lifetime and backend selection."""

    default_ttl_ms: int = DEFAULT_TTL_MS
    backend: str = DEFAULT_BACKEND

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenConfig":
        """Read ``SEALTOKEN_DEFAULT_TTL_MS`` and ``SEALTOKEN_BACKEND``."""
        env = os.environ if environ is None else environ
        raw_ttl = env.get("SEALTOKEN_DEFAULT_TTL_MS", str(DEFAULT_TTL_MS))
        try:
            ttl_ms = int(raw_ttl)
        except ValueError:
            raise InvalidInputError(f"SEALTOKEN_DEFAULT_TTL_MS must be an integer, got '{raw_ttl}'") from None
        config = cls(default_ttl_ms=ttl_ms, backend=env.get("SEALTOKEN_BACKEND", DEFAULT_BACKEND))
        config.resolve_backend()
        return config

    def resolve_backend(self) -> SealingBackend:
        return get_backend(self.backend)
