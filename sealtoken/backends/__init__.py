"""Sealing backends."""

from .asymmetric import AuthenticatedBoxBackend, SealedBoxBackend, opening_key, sealing_key
from .base import SealingBackend
from .keys import KeyPair, OpeningKey, SealingKey, generate_keypair
from .registry import DEFAULT_REGISTRY, BackendRegistry, available_backends, get_backend, register_backend
from .symmetric import AESGCMBackend, ChaCha20Poly1305Backend, SymmetricBackend

__all__ = [
    "SealingBackend",
    "SymmetricBackend",
    "ChaCha20Poly1305Backend",
    "AESGCMBackend",
    "SealedBoxBackend",
    "AuthenticatedBoxBackend",
    "KeyPair",
    "SealingKey",
    "OpeningKey",
    "generate_keypair",
    "sealing_key",
    "opening_key",
    "BackendRegistry",
    "DEFAULT_REGISTRY",
    "get_backend",
    "register_backend",
    "available_backends",
]
