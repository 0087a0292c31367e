"""Registry mapping backend names to factories."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..errors import InvalidInputError
from .asymmetric import AuthenticatedBoxBackend, SealedBoxBackend
from .base import SealingBackend
from .symmetric import AESGCMBackend, ChaCha20Poly1305Backend

BackendFactory = Callable[[], SealingBackend]


class BackendRegistry:
    """Name lookup for sealing backends; holds factories, never key material."""

    def __init__(self) -> None:
        self._factories: Dict[str, BackendFactory] = {}

    def register(self, name: str, factory: BackendFactory) -> None:
        self._factories[name.lower()] = factory

    def get(self, name: str) -> SealingBackend:
        try:
            factory = self._factories[name.lower()]
        except KeyError:
            raise InvalidInputError(
                f"Unknown backend '{name}'. Expected one of: {', '.join(self.names())}."
            ) from None
        return factory()

    def names(self) -> List[str]:
        return sorted(self._factories)


DEFAULT_REGISTRY = BackendRegistry()
for _backend in (ChaCha20Poly1305Backend, AESGCMBackend, SealedBoxBackend, AuthenticatedBoxBackend):
    DEFAULT_REGISTRY.register(_backend.name, _backend)


def get_backend(name: str) -> SealingBackend:
    return DEFAULT_REGISTRY.get(name)


def register_backend(name: str, factory: BackendFactory) -> None:
    DEFAULT_REGISTRY.register(name, factory)


def available_backends() -> List[str]:
    return DEFAULT_REGISTRY.names()
