"""Alias parsing and validation.

Validation is total: any input that is not a well formed alias carrying the
correct digest yields ``False``.  Structural problems are never raised.  The
one exception that does propagate is
:class:`~email_alias.utils.errors.PrimitiveUnavailableError`, which signals a
broken environment rather than a bad alias.
"""

from __future__ import annotations

import hmac
import re
from dataclasses import dataclass

from ..crypto.provider import KeyedHashProvider
from ..utils.errors import InvalidInputError
from ..utils.logging import get_logger
from .encoder import (
    DEFAULT_HASH_LENGTH,
    PART_SEPARATOR,
    check_hash_length,
    compute_digest,
    key_bytes,
)

__all__ = ["ParsedAlias", "parse_alias", "constant_time_equals", "validate_email_alias"]

_HEX_RX = re.compile(r"[0-9a-f]+")

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ParsedAlias:
    """Components recovered from an alias string."""

    prefix: str
    digest: str
    domain: str

    @property
    def parts(self) -> list[str]:
        """Prefix split on ``-``.  Lossy when a part contained ``-``."""

        return self.prefix.split(PART_SEPARATOR)


def parse_alias(full_alias: object, hash_length: int = DEFAULT_HASH_LENGTH) -> ParsedAlias | None:
    """Split ``full_alias`` into prefix, digest and domain.

    Returns ``None`` when the value is not a string, does not contain exactly
    one ``@`` with text on both sides, has no ``-`` delimited digest, or the
    digest is not ``hash_length`` lowercase hex characters.
    """

    if not isinstance(full_alias, str) or not full_alias:
        return None
    if full_alias.count("@") != 1:
        return None
    local, _, domain = full_alias.partition("@")
    if not local or not domain:
        return None

    prefix, sep, digest = local.rpartition(PART_SEPARATOR)
    if not sep or not prefix:
        return None
    if len(digest) != hash_length or not _HEX_RX.fullmatch(digest):
        return None
    return ParsedAlias(prefix=prefix, digest=digest, domain=domain)


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two ASCII strings in time independent of their first difference."""

    try:
        return hmac.compare_digest(a.encode("ascii"), b.encode("ascii"))
    except UnicodeEncodeError:
        return False


def validate_email_alias(
    secret_key: str | bytes,
    full_alias: object,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    provider: KeyedHashProvider | None = None,
) -> bool:
    """Return ``True`` iff ``full_alias`` carries the digest ``secret_key`` implies.

    The digest is recomputed from the full prefix string exactly as
    :func:`~email_alias.codec.encoder.generate_email_alias` computes it.
    """

    try:
        check_hash_length(hash_length)
        key_bytes(secret_key)
    except InvalidInputError as exc:
        log.debug("Rejected alias: %s", exc)
        return False

    parsed = parse_alias(full_alias, hash_length)
    if parsed is None:
        log.debug("Rejected alias: malformed")
        return False

    expected = compute_digest(secret_key, parsed.prefix, hash_length, provider=provider)
    return constant_time_equals(parsed.digest, expected)
