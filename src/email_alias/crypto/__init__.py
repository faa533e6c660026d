"""Keyed-hash primitives consumed by the alias codec."""

from .provider import (
    DEFAULT_PROVIDER,
    CryptographyHmacProvider,
    HmacSha256Provider,
    KeyedHashProvider,
    available_providers,
    register_provider,
    resolve_provider,
)

__all__ = [
    "DEFAULT_PROVIDER",
    "CryptographyHmacProvider",
    "HmacSha256Provider",
    "KeyedHashProvider",
    "available_providers",
    "register_provider",
    "resolve_provider",
]
