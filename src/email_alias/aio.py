"""Coroutine wrappers around the alias codec.

These mirror a promise-returning interface for callers living inside an event
loop.  The codec is pure and CPU-bound on a 32-byte hash, so the work runs
inline; awaiting the call is the only suspension point.
"""

from __future__ import annotations

from collections.abc import Sequence

from .codec.encoder import DEFAULT_HASH_LENGTH, generate_email_alias
from .codec.validator import validate_email_alias
from .crypto.provider import KeyedHashProvider

__all__ = ["generate_email_alias_async", "validate_email_alias_async"]


async def generate_email_alias_async(
    secret_key: str | bytes,
    alias_parts: Sequence[str],
    domain: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    provider: KeyedHashProvider | None = None,
) -> str:
    """Async form of :func:`~email_alias.codec.encoder.generate_email_alias`."""

    return generate_email_alias(secret_key, alias_parts, domain, hash_length, provider=provider)


async def validate_email_alias_async(
    secret_key: str | bytes,
    full_alias: object,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    provider: KeyedHashProvider | None = None,
) -> bool:
    """Async form of :func:`~email_alias.codec.validator.validate_email_alias`."""

    return validate_email_alias(secret_key, full_alias, hash_length, provider=provider)
