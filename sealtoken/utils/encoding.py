"""Text helpers for carrying wire tokens in URLs and headers."""

from __future__ import annotations

import base64
import binascii

from ..errors import DecryptionError


def b64url_encode(raw: bytes) -> str:
    """Return unpadded URL-safe base64 text for raw bytes."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded URL-safe base64 text.

    Undecodable input is reported the same way as a token that fails to
    authenticate, so callers see one generic rejection.
    """
    try:
        raw = text.encode("ascii")
        if b"+" in raw or b"/" in raw or b"=" in raw:
            raise ValueError("not unpadded url-safe base64")
        return base64.b64decode(raw + b"=" * (-len(raw) % 4), altchars=b"-_", validate=True)
    except (UnicodeEncodeError, binascii.Error, ValueError):
        raise DecryptionError() from None
