"""Alias generation.

An alias has the shape ``<part1>-...-<partN>-<digest>@<domain>``.  The digest
is the lowercase hex HMAC-SHA256 of the *local prefix* (the parts joined with
``-``, UTF-8 encoded) truncated to ``hash_length`` characters.  The domain is
appended verbatim and is not bound into the hashed message.

Parts are not normalized or escaped.  A part may itself contain ``-``; this is
harmless because validation recomputes the digest from the whole prefix
string, never from individual parts.

Security notes
--------------
The secret key is never logged.  Only the number of parts and the hash length
are emitted at ``DEBUG`` level.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..crypto.provider import DEFAULT_PROVIDER, DIGEST_SIZE, KeyedHashProvider
from ..utils.errors import InvalidInputError
from ..utils.logging import get_logger

__all__ = [
    "DEFAULT_HASH_LENGTH",
    "MAX_HASH_LENGTH",
    "PART_SEPARATOR",
    "key_bytes",
    "build_local_prefix",
    "canonical_message",
    "check_hash_length",
    "compute_digest",
    "generate_email_alias",
]

DEFAULT_HASH_LENGTH = 8
MAX_HASH_LENGTH = DIGEST_SIZE * 2
PART_SEPARATOR = "-"

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def key_bytes(secret_key: str | bytes) -> bytes:
    """Return ``secret_key`` as bytes; text keys are UTF-8 encoded."""

    if isinstance(secret_key, (bytes, bytearray)):
        raw = bytes(secret_key)
    elif isinstance(secret_key, str):
        raw = secret_key.encode("utf-8")
    else:
        raise InvalidInputError("secretKey must be a string or bytes")
    if not raw:
        raise InvalidInputError("secretKey cannot be empty")
    return raw


def build_local_prefix(alias_parts: Sequence[str]) -> str:
    """Join ``alias_parts`` with ``-`` after checking each part."""

    if isinstance(alias_parts, (str, bytes)) or not isinstance(alias_parts, Sequence):
        raise InvalidInputError("aliasParts must be a list of strings")
    if len(alias_parts) == 0:
        raise InvalidInputError("The `aliasParts` array cannot be empty.")
    for index, part in enumerate(alias_parts):
        if not isinstance(part, str):
            raise InvalidInputError(f"aliasParts[{index}] must be a string")
        if not part:
            raise InvalidInputError(f"aliasParts[{index}] cannot be empty")
        if "@" in part:
            raise InvalidInputError(f"aliasParts[{index}] cannot contain '@'")
    return PART_SEPARATOR.join(alias_parts)


def canonical_message(local_prefix: str) -> bytes:
    """Return the exact bytes fed to the keyed hash for ``local_prefix``."""

    return local_prefix.encode("utf-8")


def check_hash_length(hash_length: int) -> int:
    """Return ``hash_length`` if it is an int within ``1..64``."""

    if isinstance(hash_length, bool) or not isinstance(hash_length, int):
        raise InvalidInputError("hashLength must be an integer")
    if not 1 <= hash_length <= MAX_HASH_LENGTH:
        raise InvalidInputError(f"hashLength must be between 1 and {MAX_HASH_LENGTH}")
    return hash_length


# ---------------------------------------------------------------------------
# Digest
# ---------------------------------------------------------------------------


def compute_digest(
    secret_key: str | bytes,
    local_prefix: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    provider: KeyedHashProvider | None = None,
) -> str:
    """Return the truncated lowercase hex digest of ``local_prefix``.

    Shared by generation and validation so both derive the message the same
    way.
    """

    signer = provider if provider is not None else DEFAULT_PROVIDER
    tag = signer.sign(key_bytes(secret_key), canonical_message(local_prefix))
    return tag.hex()[: check_hash_length(hash_length)]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_email_alias(
    secret_key: str | bytes,
    alias_parts: Sequence[str],
    domain: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    provider: KeyedHashProvider | None = None,
) -> str:
    """Return ``<parts>-<digest>@<domain>`` for the given inputs.

    Parameters
    ----------
    secret_key:
        Key material for the HMAC.  Text is UTF-8 encoded.
    alias_parts:
        Non-empty ordered sequence of non-empty strings.  Order matters.
    domain:
        Appended verbatim after ``@``.
    hash_length:
        Number of hex characters kept from the 64 character digest.
    provider:
        Keyed-hash backend; defaults to :data:`DEFAULT_PROVIDER`.

    Raises
    ------
    InvalidInputError
        On empty parts, an empty key or domain, an ``@`` in a part or the
        domain, or a hash length outside ``1..64``.
    PrimitiveUnavailableError
        If the provider cannot compute the hash.
    """

    local_prefix = build_local_prefix(alias_parts)
    if not isinstance(domain, str) or not domain:
        raise InvalidInputError("domain must be a non-empty string")
    if "@" in domain:
        raise InvalidInputError("domain cannot contain '@'")
    check_hash_length(hash_length)

    digest = compute_digest(secret_key, local_prefix, hash_length, provider=provider)
    log.debug("Generated alias from %d part(s), hash length %d", len(alias_parts), hash_length)
    return f"{local_prefix}{PART_SEPARATOR}{digest}@{domain}"
