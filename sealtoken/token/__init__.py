"""Token model, issuance and verification."""

from .codec import FORMAT_VERSION, decode, encode, is_expired
from .issuer import TokenIssuer
from .service import issue, redeem
from .types import IssuedToken, RedeemResult, Token
from .verifier import TokenVerifier

__all__ = [
    "issue",
    "redeem",
    "Token",
    "IssuedToken",
    "RedeemResult",
    "TokenIssuer",
    "TokenVerifier",
    "encode",
    "decode",
    "is_expired",
    "FORMAT_VERSION",
]
