"""X25519 public-key backends.

Both backends derive a one-time ChaCha20-Poly1305 key with HKDF-SHA256 from an
ephemeral X25519 exchange and publish the ephemeral public key in front of the
symmetric frame:

    [ephemeral public 32][nonce 12][ciphertext][tag 16]

``AuthenticatedBoxBackend`` also mixes in the static sender/recipient exchange,
so a token opens only with the recipient private key and the genuine sender
public key.
"""

from __future__ import annotations

from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..errors import AuthenticationError, InvalidInputError, InvalidKeyError
from .base import SealingBackend, random_bytes
from .keys import (
    X25519_KEY_SIZE,
    KeyPair,
    OpeningKey,
    SealingKey,
    generate_keypair,
    load_private,
    load_public,
    public_bytes,
)
from .symmetric import KEY_SIZE, NONCE_SIZE, TAG_SIZE

EPHEMERAL_SIZE = X25519_KEY_SIZE
OVERHEAD = EPHEMERAL_SIZE + NONCE_SIZE + TAG_SIZE


def _derive_key(label: bytes, secret: bytes, *context: bytes) -> bytes:
    return HKDF(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=None,
        info=label + b"".join(context),
    ).derive(secret)


class _BoxBackend(SealingBackend):
    label = b""
    overhead = OVERHEAD

    def _frame(self, key: bytes, ephemeral_public: bytes, plaintext: bytes, associated_data: Optional[bytes]) -> bytes:
        nonce = random_bytes(NONCE_SIZE)
        return ephemeral_public + nonce + ChaCha20Poly1305(key).encrypt(nonce, bytes(plaintext), associated_data)

    def _unframe(self, ciphertext: bytes) -> Tuple[bytes, bytes, bytes]:
        if len(ciphertext) < self.overhead:
            raise AuthenticationError()
        ephemeral_public = bytes(ciphertext[:EPHEMERAL_SIZE])
        nonce = bytes(ciphertext[EPHEMERAL_SIZE : EPHEMERAL_SIZE + NONCE_SIZE])
        body = bytes(ciphertext[EPHEMERAL_SIZE + NONCE_SIZE :])
        return ephemeral_public, nonce, body

    @staticmethod
    def _decrypt(key: bytes, nonce: bytes, body: bytes, associated_data: Optional[bytes]) -> bytes:
        try:
            return ChaCha20Poly1305(key).decrypt(nonce, body, associated_data)
        except InvalidTag:
            raise AuthenticationError() from None

    def generate_key(self) -> KeyPair:
        return generate_keypair()

    @staticmethod
    def _require_pair(key: object) -> KeyPair:
        if not isinstance(key, KeyPair):
            raise InvalidKeyError(f"expected a KeyPair, not {type(key).__name__}")
        return key


class SealedBoxBackend(_BoxBackend):
    """Anonymous sealing to a recipient public key; opened with its private key."""

    name = "x25519-sealed"
    label = b"sealtoken/x25519-sealed/v1"

    def seal_key_for(self, key: KeyPair, peer_public: Optional[bytes] = None) -> bytes:
        return self._require_pair(key).public

    def open_key_for(self, key: KeyPair, peer_public: Optional[bytes] = None) -> bytes:
        return self._require_pair(key).private

    def seal(self, seal_key: bytes, plaintext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        recipient = load_public(seal_key, "recipient public key")
        ephemeral = X25519PrivateKey.generate()
        ephemeral_public = public_bytes(ephemeral.public_key())
        try:
            shared = ephemeral.exchange(recipient)
        except ValueError as exc:
            raise InvalidKeyError("recipient public key is a low-order point") from exc
        key = _derive_key(self.label, shared, ephemeral_public, public_bytes(recipient))
        return self._frame(key, ephemeral_public, plaintext, associated_data)

    def open(self, open_key: bytes, ciphertext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        try:
            recipient = load_private(open_key, "recipient private key")
        except InvalidKeyError:
            raise AuthenticationError() from None
        ephemeral_public, nonce, body = self._unframe(ciphertext)
        try:
            shared = recipient.exchange(load_public(ephemeral_public))
        except ValueError:
            raise AuthenticationError() from None
        key = _derive_key(self.label, shared, ephemeral_public, public_bytes(recipient.public_key()))
        return self._decrypt(key, nonce, body, associated_data)


class AuthenticatedBoxBackend(_BoxBackend):
    """Sender-authenticated sealing between two X25519 key pairs."""

    name = "x25519-box"
    label = b"sealtoken/x25519-box/v1"

    def seal_key_for(self, key: KeyPair, peer_public: Optional[bytes] = None) -> SealingKey:
        """Seal from ``key`` to ``peer_public``; without a peer the token is addressed to ``key`` itself."""
        pair = self._require_pair(key)
        return sealing_key(pair, pair.public if peer_public is None else peer_public)

    def open_key_for(self, key: KeyPair, peer_public: Optional[bytes] = None) -> OpeningKey:
        """Open with ``key`` tokens sealed by ``peer_public``, or by ``key`` itself."""
        pair = self._require_pair(key)
        return opening_key(pair, pair.public if peer_public is None else peer_public)

    def seal(self, seal_key: SealingKey, plaintext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        if not isinstance(seal_key, SealingKey):
            raise InvalidKeyError(f"seal key must be a SealingKey, not {type(seal_key).__name__}")
        sender = load_private(seal_key.sender_private, "sender private key")
        recipient = load_public(seal_key.recipient_public, "recipient public key")
        ephemeral = X25519PrivateKey.generate()
        ephemeral_public = public_bytes(ephemeral.public_key())
        try:
            shared = ephemeral.exchange(recipient) + sender.exchange(recipient)
        except ValueError as exc:
            raise InvalidKeyError("recipient public key is a low-order point") from exc
        key = _derive_key(
            self.label,
            shared,
            ephemeral_public,
            public_bytes(sender.public_key()),
            public_bytes(recipient),
        )
        return self._frame(key, ephemeral_public, plaintext, associated_data)

    def open(self, open_key: OpeningKey, ciphertext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        if not isinstance(open_key, OpeningKey):
            raise AuthenticationError()
        try:
            recipient = load_private(open_key.recipient_private, "recipient private key")
            sender = load_public(open_key.sender_public, "sender public key")
        except InvalidKeyError:
            raise AuthenticationError() from None
        ephemeral_public, nonce, body = self._unframe(ciphertext)
        try:
            shared = recipient.exchange(load_public(ephemeral_public)) + recipient.exchange(sender)
        except ValueError:
            raise AuthenticationError() from None
        key = _derive_key(
            self.label,
            shared,
            ephemeral_public,
            public_bytes(sender),
            public_bytes(recipient.public_key()),
        )
        return self._decrypt(key, nonce, body, associated_data)


def sealing_key(sender: KeyPair, recipient_public: bytes) -> SealingKey:
    if not isinstance(sender, KeyPair):
        raise InvalidInputError("sender must be a KeyPair")
    return SealingKey(sender_private=sender.private, recipient_public=bytes(recipient_public))


def opening_key(recipient: KeyPair, sender_public: bytes) -> OpeningKey:
    if not isinstance(recipient, KeyPair):
        raise InvalidInputError("recipient must be a KeyPair")
    return OpeningKey(recipient_private=recipient.private, sender_public=bytes(sender_public))
