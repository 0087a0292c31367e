from datetime import timedelta

import pytest

from sealtoken import (
    ChaCha20Poly1305Backend,
    DecryptionError,
    ExpiredError,
    InvalidInputError,
    TokenConfig,
    TokenIssuer,
    TokenVerifier,
)
from sealtoken.backends import available_backends, get_backend
from sealtoken.utils.encoding import b64url_decode, b64url_encode


class FakeClock:
    def __init__(self, start: int) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now


def _pair(ttl_ms: int = 100):
    backend = ChaCha20Poly1305Backend()
    key = backend.generate_key()
    clock = FakeClock(1_000_000)
    return TokenIssuer(backend, key, ttl_ms=ttl_ms, clock=clock), TokenVerifier(backend, key, clock=clock), clock


def test_issue_and_redeem_with_default_ttl() -> None:
    issuer, verifier, clock = _pair()
    issued = issuer.issue(b"payload", associated_data=b"route:/files")
    assert issued.expiration_timestamp == 1_000_100

    clock.now += 50
    assert verifier.redeem(issued.token, associated_data=b"route:/files").unwrap().payload == b"payload"

    clock.now += 100
    expired = verifier.redeem(issued.token, associated_data=b"route:/files")
    assert isinstance(expired.error, ExpiredError)
    assert expired.token is not None and expired.token.payload == b"payload"


def test_explicit_lifetime_and_instant() -> None:
    issuer, _, _ = _pair()
    assert issuer.issue(lifetime=timedelta(seconds=1)).expiration_timestamp == 1_001_000
    assert issuer.issue(expires_at=42).expiration_timestamp == 42
    with pytest.raises(InvalidInputError):
        issuer.issue(lifetime=100, expires_at=42)


def test_text_round_trip() -> None:
    issuer, verifier, _ = _pair()
    text = issuer.issue_text(b"hi")
    assert "=" not in text
    assert verifier.redeem_text(text).unwrap().payload == b"hi"


def test_redeem_text_rejects_garbage() -> None:
    _, verifier, _ = _pair()
    for text in ("a", "not base64 ü", "", "ab!cd", "ab+/", "abc="):
        result = verifier.redeem_text(text)
        assert isinstance(result.error, DecryptionError)
        assert result.token is None


def test_b64url_helpers() -> None:
    assert b64url_encode(b"\xfb\xff") == "-_8"
    assert b64url_decode("-_8") == b"\xfb\xff"
    for text in ("abcde", "-_!8", "+/8"):
        with pytest.raises(DecryptionError):
            b64url_decode(text)


def test_issuer_uses_config_ttl() -> None:
    backend = ChaCha20Poly1305Backend()
    issuer = TokenIssuer(backend, backend.generate_key(), config=TokenConfig(default_ttl_ms=5000), clock=lambda: 0)
    assert issuer.ttl_ms == 5000
    assert issuer.issue().expiration_timestamp == 5000


def test_config_from_env() -> None:
    config = TokenConfig.from_env({"SEALTOKEN_DEFAULT_TTL_MS": "1500", "SEALTOKEN_BACKEND": "aes256gcm"})
    assert config.default_ttl_ms == 1500
    assert config.resolve_backend().name == "aes256gcm"
    assert TokenConfig.from_env({}) == TokenConfig()


def test_config_from_env_rejects_bad_values() -> None:
    with pytest.raises(InvalidInputError):
        TokenConfig.from_env({"SEALTOKEN_DEFAULT_TTL_MS": "soon"})
    with pytest.raises(InvalidInputError):
        TokenConfig.from_env({"SEALTOKEN_BACKEND": "rot13"})


@pytest.mark.parametrize("name", available_backends())
def test_every_configured_backend_issues_and_redeems(name) -> None:
    backend = TokenConfig.from_env({"SEALTOKEN_BACKEND": name}).resolve_backend()
    assert backend.name == get_backend(name).name
    key = backend.generate_key()
    clock = FakeClock(0)
    issuer = TokenIssuer(backend, backend.seal_key_for(key), ttl_ms=100, clock=clock)
    verifier = TokenVerifier(backend, backend.open_key_for(key), clock=clock)

    text = issuer.issue_text(b"files:read", associated_data=b"user-42")
    assert verifier.redeem_text(text, associated_data=b"user-42").unwrap().payload == b"files:read"
    assert isinstance(verifier.redeem_text(text, associated_data=b"user-7").error, DecryptionError)
