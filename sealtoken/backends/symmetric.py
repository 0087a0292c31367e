"""Shared-secret AEAD backends.

Wire layout: ``[nonce][ciphertext][tag]`` with a 12-byte random nonce and a
16-byte tag for both ciphers.
"""

from __future__ import annotations

from typing import Optional, Type, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from ..errors import AuthenticationError, InvalidKeyError
from .base import SealingBackend, random_bytes, require_key

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
OVERHEAD = NONCE_SIZE + TAG_SIZE

_Cipher = Union[ChaCha20Poly1305, AESGCM]


class SymmetricBackend(SealingBackend):
    """Single shared secret for seal and open, random nonce prefix."""

    cipher: Type[_Cipher] = ChaCha20Poly1305
    key_size = KEY_SIZE
    nonce_size = NONCE_SIZE
    tag_size = TAG_SIZE
    overhead = OVERHEAD

    def seal(self, seal_key: bytes, plaintext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        aead = self.cipher(require_key(seal_key, self.key_size))
        nonce = random_bytes(self.nonce_size)
        return nonce + aead.encrypt(nonce, bytes(plaintext), associated_data)

    def open(self, open_key: bytes, ciphertext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        try:
            aead = self.cipher(require_key(open_key, self.key_size))
        except InvalidKeyError:
            raise AuthenticationError() from None
        if len(ciphertext) < self.overhead:
            raise AuthenticationError()
        nonce = bytes(ciphertext[: self.nonce_size])
        try:
            return aead.decrypt(nonce, bytes(ciphertext[self.nonce_size :]), associated_data)
        except InvalidTag:
            raise AuthenticationError() from None

    def generate_key(self) -> bytes:
        return random_bytes(self.key_size)


class ChaCha20Poly1305Backend(SymmetricBackend):
    name = "chacha20poly1305"
    cipher = ChaCha20Poly1305


class AESGCMBackend(SymmetricBackend):
    name = "aes256gcm"
    cipher = AESGCM
