"""Key material containers for asymmetric backends."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from .base import require_key

X25519_KEY_SIZE = 32
_FIELD_PRIME = 2**255 - 19


@dataclass(frozen=True)
class KeyPair:
    """Raw X25519 private and public key bytes for one party."""

    private: bytes
    public: bytes

    def __repr__(self) -> str:
        return f"KeyPair(public={self.public.hex()})"


@dataclass(frozen=True)
class SealingKey:
    """Sender private key plus recipient public key."""

    sender_private: bytes
    recipient_public: bytes

    def __repr__(self) -> str:
        return f"SealingKey(recipient_public={self.recipient_public.hex()})"


@dataclass(frozen=True)
class OpeningKey:
    """Recipient private key plus sender public key."""

    recipient_private: bytes
    sender_public: bytes

    def __repr__(self) -> str:
        return f"OpeningKey(sender_public={self.sender_public.hex()})"


def canonical_public(raw: bytes) -> bytes:
    """Return the canonical u-coordinate encoding of an X25519 public key.

    The top bit is masked and the value reduced modulo 2^255 - 19, so every
    encoding of the same point yields the same bytes.
    """
    u = int.from_bytes(raw, "little") & ((1 << 255) - 1)
    return (u % _FIELD_PRIME).to_bytes(X25519_KEY_SIZE, "little")


def public_bytes(key: X25519PublicKey) -> bytes:
    return canonical_public(key.public_bytes(Encoding.Raw, PublicFormat.Raw))


def load_private(raw: bytes, label: str = "private key") -> X25519PrivateKey:
    return X25519PrivateKey.from_private_bytes(require_key(raw, X25519_KEY_SIZE, label))


def load_public(raw: bytes, label: str = "public key") -> X25519PublicKey:
    return X25519PublicKey.from_public_bytes(require_key(raw, X25519_KEY_SIZE, label))


def generate_keypair() -> KeyPair:
    """Generate a fresh X25519 key pair."""
    private = X25519PrivateKey.generate()
    return KeyPair(
        private=private.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption()),
        public=public_bytes(private.public_key()),
    )
