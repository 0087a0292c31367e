"""Example: issue a short-lived capability token and redeem it twice."""

from __future__ import annotations

import logging
import time

from sealtoken import TokenConfig, TokenIssuer, TokenVerifier


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    config = TokenConfig.from_env()
    backend = config.resolve_backend()
    key = backend.generate_key()

    issuer = TokenIssuer(backend, backend.seal_key_for(key), ttl_ms=200, config=config)
    verifier = TokenVerifier(backend, backend.open_key_for(key))

    text = issuer.issue_text(b"files:read", associated_data=b"user-42")
    print("token:", text)

    result = verifier.redeem_text(text, associated_data=b"user-42")
    print("fresh:", result.reason, result.token.payload if result.token else None)

    time.sleep(0.25)
    result = verifier.redeem_text(text, associated_data=b"user-42")
    print("later:", result.reason, result.token.payload if result.token else None)


if __name__ == "__main__":
    main()
