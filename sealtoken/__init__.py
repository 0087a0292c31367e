"""sealtoken package.

Compact, self-contained expiring tokens sealed with authenticated encryption.
A token carries its expiration instant and an opaque payload; verification
needs only the opening key and the wall clock.
"""

from .backends import (
    AESGCMBackend,
    AuthenticatedBoxBackend,
    ChaCha20Poly1305Backend,
    KeyPair,
    OpeningKey,
    SealedBoxBackend,
    SealingBackend,
    SealingKey,
    generate_keypair,
    get_backend,
)
from .config import TokenConfig
from .errors import (
    AuthenticationError,
    DecodeError,
    DecryptionError,
    EncodingError,
    ExpiredError,
    InvalidInputError,
    InvalidKeyError,
    MalformedTokenError,
    TokenError,
)
from .token.service import issue, redeem
from .token import IssuedToken, RedeemResult, Token, TokenIssuer, TokenVerifier

__all__ = [
    "issue",
    "redeem",
    "Token",
    "IssuedToken",
    "RedeemResult",
    "TokenIssuer",
    "TokenVerifier",
    "TokenConfig",
    "SealingBackend",
    "ChaCha20Poly1305Backend",
    "AESGCMBackend",
    "SealedBoxBackend",
    "AuthenticatedBoxBackend",
    "KeyPair",
    "SealingKey",
    "OpeningKey",
    "generate_keypair",
    "get_backend",
    "TokenError",
    "InvalidInputError",
    "InvalidKeyError",
    "EncodingError",
    "AuthenticationError",
    "DecryptionError",
    "DecodeError",
    "MalformedTokenError",
    "ExpiredError",
]
