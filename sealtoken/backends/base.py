"""Base sealing backend interface."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..errors import InvalidKeyError


class SealingBackend(ABC):
    """Authenticated encryption capability used to seal and open tokens.

    ``seal`` must embed any randomness it needs in the returned bytes.
    ``open`` must raise a single generic ``AuthenticationError`` for every kind
    of failure: short input, bad tag, wrong key, wrong associated data.
    """

    name: str = "abstract"
    overhead: int = 0

    @abstractmethod
    def seal(self, seal_key: Any, plaintext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        """Encrypt and authenticate ``plaintext``."""

    @abstractmethod
    def open(self, open_key: Any, ciphertext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        """Authenticate and decrypt ``ciphertext``."""

    @abstractmethod
    def generate_key(self) -> Any:
        """Return fresh key material; split it with ``seal_key_for``/``open_key_for``."""

    def seal_key_for(self, key: Any, peer_public: Optional[bytes] = None) -> Any:
        """Return the sealing key for material produced by ``generate_key``.

        Shared-secret backends seal and open with the same key. ``peer_public``
        names the other party where the backend needs one.
        """
        return key

    def open_key_for(self, key: Any, peer_public: Optional[bytes] = None) -> Any:
        """Return the opening key for material produced by ``generate_key``."""
        return key

    def ciphertext_size(self, plaintext_size: int) -> int:
        return plaintext_size + self.overhead


def random_bytes(size: int) -> bytes:
    """Return ``size`` bytes from the operating system CSPRNG."""
    return os.urandom(size)


def require_key(key: Any, size: int, label: str = "key") -> bytes:
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKeyError(f"{label} must be bytes, not {type(key).__name__}")
    raw = bytes(key)
    if len(raw) != size:
        raise InvalidKeyError(f"{label} must be {size} bytes, got {len(raw)}")
    return raw
