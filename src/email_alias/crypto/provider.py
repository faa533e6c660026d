"""HMAC-SHA256 providers and a name based registry.

The codec depends only on :class:`KeyedHashProvider`: one ``sign`` call taking
raw key bytes and message bytes and returning the 32-byte HMAC-SHA256 tag.
Concrete providers are selected by name through :func:`resolve_provider`,
normally once when the process starts.

Two providers are registered by default:

``hmac``
    The standard library :mod:`hmac` module over :mod:`hashlib`.
``cryptography``
    :mod:`cryptography.hazmat.primitives.hmac`.  The package is imported on
    demand; :class:`PrimitiveUnavailableError` is raised when it is missing.

``auto`` resolves to ``hmac``.  Every provider must produce byte-identical
output for the same key and message.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Callable, Protocol, runtime_checkable

from ..utils.errors import PrimitiveUnavailableError
from ..utils.logging import get_logger

__all__ = [
    "DIGEST_SIZE",
    "KeyedHashProvider",
    "HmacSha256Provider",
    "CryptographyHmacProvider",
    "DEFAULT_PROVIDER",
    "register_provider",
    "available_providers",
    "resolve_provider",
]

DIGEST_SIZE = 32

log = get_logger(__name__)


@runtime_checkable
class KeyedHashProvider(Protocol):
    """Protocol implemented by HMAC-SHA256 backends."""

    name: str

    def sign(self, key: bytes, message: bytes) -> bytes:
        """Return HMAC-SHA256 of ``message`` under ``key``."""


class HmacSha256Provider:
    """HMAC-SHA256 through the standard library."""

    name = "hmac"

    def sign(self, key: bytes, message: bytes) -> bytes:
        return hmac.new(key, message, hashlib.sha256).digest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CryptographyHmacProvider:
    """HMAC-SHA256 through the ``cryptography`` package."""

    name = "cryptography"

    def __init__(self) -> None:
        try:
            from cryptography.hazmat.primitives import hashes
            from cryptography.hazmat.primitives import hmac as crypto_hmac
        except ImportError as exc:
            raise PrimitiveUnavailableError(
                "The 'cryptography' provider requires the cryptography package"
            ) from exc
        self._hashes = hashes
        self._hmac = crypto_hmac

    def sign(self, key: bytes, message: bytes) -> bytes:
        h = self._hmac.HMAC(key, self._hashes.SHA256())
        h.update(message)
        return h.finalize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_PROVIDER: KeyedHashProvider = HmacSha256Provider()

_FACTORIES: dict[str, Callable[[], KeyedHashProvider]] = {}


def register_provider(name: str, factory: Callable[[], KeyedHashProvider]) -> None:
    """Register ``factory`` under ``name`` (case-insensitive).

    Registering an existing name replaces the previous factory.
    """

    _FACTORIES[name.lower()] = factory


def available_providers() -> list[str]:
    """Return registered provider names in sorted order."""

    return sorted(_FACTORIES)


def resolve_provider(name: str = "auto") -> KeyedHashProvider:
    """Instantiate the provider registered under ``name``.

    Raises
    ------
    PrimitiveUnavailableError
        If ``name`` is unknown or the backend cannot be loaded.
    """

    key = "hmac" if name.lower() == "auto" else name.lower()
    factory = _FACTORIES.get(key)
    if factory is None:
        raise PrimitiveUnavailableError(
            f"No keyed-hash provider named {name!r}; available: {', '.join(available_providers())}"
        )
    provider = factory()
    if not isinstance(provider, KeyedHashProvider):
        raise PrimitiveUnavailableError(f"Provider {name!r} does not implement sign()")
    log.debug("Resolved keyed-hash provider %s", provider.name)
    return provider


register_provider("hmac", HmacSha256Provider)
register_provider("cryptography", CryptographyHmacProvider)
