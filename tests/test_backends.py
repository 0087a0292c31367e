import pytest

from sealtoken.backends import (
    AESGCMBackend,
    AuthenticatedBoxBackend,
    ChaCha20Poly1305Backend,
    SealedBoxBackend,
    available_backends,
    generate_keypair,
    get_backend,
    opening_key,
    sealing_key,
)
from sealtoken.backends.symmetric import NONCE_SIZE, OVERHEAD, TAG_SIZE
from sealtoken.errors import AuthenticationError, InvalidInputError, InvalidKeyError


@pytest.mark.parametrize("backend", [ChaCha20Poly1305Backend(), AESGCMBackend()])
def test_symmetric_seal_open(backend) -> None:
    key = backend.generate_key()
    sealed = backend.seal(key, b"plaintext", b"ad")
    assert len(sealed) == len(b"plaintext") + NONCE_SIZE + TAG_SIZE
    assert backend.open(key, sealed, b"ad") == b"plaintext"


def test_symmetric_overhead_constants() -> None:
    backend = ChaCha20Poly1305Backend()
    assert OVERHEAD == 28
    assert backend.ciphertext_size(8) == 36


def test_symmetric_seal_uses_fresh_nonce() -> None:
    backend = ChaCha20Poly1305Backend()
    key = backend.generate_key()
    assert backend.seal(key, b"same") != backend.seal(key, b"same")


@pytest.mark.parametrize("backend", [ChaCha20Poly1305Backend(), AESGCMBackend()])
def test_symmetric_failures_are_uniform(backend) -> None:
    key = backend.generate_key()
    sealed = backend.seal(key, b"plaintext", b"ad")
    for bad in (
        lambda: backend.open(backend.generate_key(), sealed, b"ad"),
        lambda: backend.open(key, sealed, b"other"),
        lambda: backend.open(key, sealed[:-1], b"ad"),
        lambda: backend.open(key, sealed[:OVERHEAD - 1], b"ad"),
        lambda: backend.open(b"short", sealed, b"ad"),
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            bad()
        assert str(exc_info.value) == "unable to authenticate token"


def test_symmetric_seal_rejects_bad_key() -> None:
    with pytest.raises(InvalidKeyError):
        ChaCha20Poly1305Backend().seal(b"\x00" * 16, b"x")


def test_sealed_box_round_trip_and_wrong_recipient() -> None:
    backend = SealedBoxBackend()
    recipient = generate_keypair()
    sealed = backend.seal(recipient.public, b"hello", b"ad")
    assert len(sealed) == 5 + backend.overhead
    assert backend.open(recipient.private, sealed, b"ad") == b"hello"
    with pytest.raises(AuthenticationError):
        backend.open(generate_keypair().private, sealed, b"ad")
    with pytest.raises(AuthenticationError):
        backend.open(recipient.private, sealed, b"other")


def test_authenticated_box_requires_matching_sender_and_recipient() -> None:
    backend = AuthenticatedBoxBackend()
    alice = backend.generate_key()
    bob = backend.generate_key()
    mallory = backend.generate_key()

    sealed = backend.seal(sealing_key(alice, bob.public), b"capability", b"ad")
    assert backend.open(opening_key(bob, alice.public), sealed, b"ad") == b"capability"

    for key in (
        opening_key(alice, bob.public),
        opening_key(bob, mallory.public),
        opening_key(mallory, alice.public),
    ):
        with pytest.raises(AuthenticationError):
            backend.open(key, sealed, b"ad")


def test_authenticated_box_rejects_raw_bytes_key() -> None:
    backend = AuthenticatedBoxBackend()
    with pytest.raises(InvalidKeyError):
        backend.seal(generate_keypair().public, b"x")
    with pytest.raises(AuthenticationError):
        backend.open(generate_keypair().private, b"\x00" * 100)


def test_registry_lookup() -> None:
    assert available_backends() == ["aes256gcm", "chacha20poly1305", "x25519-box", "x25519-sealed"]
    assert isinstance(get_backend("ChaCha20Poly1305"), ChaCha20Poly1305Backend)
    with pytest.raises(InvalidInputError):
        get_backend("rot13")


def _with_top_bit(public: bytes) -> bytes:
    return public[:-1] + bytes([public[-1] | 0x80])


def test_sealed_box_accepts_recipient_key_with_top_bit_set() -> None:
    backend = SealedBoxBackend()
    recipient = generate_keypair()
    sealed = backend.seal(_with_top_bit(recipient.public), b"hello")
    assert backend.open(recipient.private, sealed) == b"hello"


def test_authenticated_box_accepts_public_keys_with_top_bit_set() -> None:
    backend = AuthenticatedBoxBackend()
    alice = generate_keypair()
    bob = generate_keypair()
    sealed = backend.seal(sealing_key(alice, _with_top_bit(bob.public)), b"hello")
    assert backend.open(opening_key(bob, _with_top_bit(alice.public)), sealed) == b"hello"


def test_key_split_helpers() -> None:
    symmetric = ChaCha20Poly1305Backend()
    key = symmetric.generate_key()
    assert symmetric.seal_key_for(key) == symmetric.open_key_for(key) == key

    sealed_box = SealedBoxBackend()
    pair = sealed_box.generate_key()
    assert sealed_box.seal_key_for(pair) == pair.public
    assert sealed_box.open_key_for(pair) == pair.private

    box = AuthenticatedBoxBackend()
    alice = box.generate_key()
    bob = box.generate_key()
    sealed = box.seal(box.seal_key_for(alice, bob.public), b"grant")
    assert box.open(box.open_key_for(bob, alice.public), sealed) == b"grant"
    with pytest.raises(InvalidKeyError):
        box.seal_key_for(alice.private)
