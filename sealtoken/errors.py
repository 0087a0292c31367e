"""Error hierarchy for token issuance and redemption."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for every error raised or returned by sealtoken."""

    reason = "token_error"


class InvalidInputError(TokenError, ValueError):
    """Caller supplied a malformed request."""

    reason = "invalid_input"


class InvalidKeyError(InvalidInputError):
    """Key material has the wrong type or size for the chosen backend."""

    reason = "invalid_key"


class EncodingError(TokenError):
    """Encoding a token into its plaintext layout failed."""

    reason = "encoding_failed"


class AuthenticationError(TokenError):
    """Ciphertext failed to authenticate.

    Raised uniformly for a wrong key, tampered or truncated bytes and
    mismatched associated data.
    """

    reason = "authentication_failed"

    def __init__(self, message: str = "unable to authenticate token") -> None:
        super().__init__(message)


class DecryptionError(AuthenticationError):
    """Redeem-level authentication failure; no token is returned."""

    def __init__(self, message: str = "unable to decrypt token") -> None:
        super().__init__(message)


class DecodeError(TokenError):
    """Plaintext does not decode to a token layout."""

    reason = "decode_failed"


class MalformedTokenError(DecodeError):
    """Authenticated plaintext is too short to hold a token."""

    reason = "malformed_token"


class ExpiredError(TokenError):
    """Token is at or past its expiration instant."""

    reason = "token_expired"

    def __init__(self, message: str = "token expired") -> None:
        super().__init__(message)
