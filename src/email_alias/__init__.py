"""Deterministic, tamper-evident email aliases.

Aliases take the form ``<parts>-<digest>@<domain>`` where ``<digest>`` is a
truncated HMAC-SHA256 of the parts under a secret key.  Any alias can be
checked again later from the key alone; nothing is stored.

Usage::

    from email_alias import generate_email_alias, validate_email_alias

    alias = generate_email_alias("secret", ["shop", "amazon"], "example.com")
    assert validate_email_alias("secret", alias)
"""

from .aio import generate_email_alias_async, validate_email_alias_async
from .codec import ParsedAlias, generate_email_alias, parse_alias, validate_email_alias
from .crypto import KeyedHashProvider, resolve_provider
from .utils.errors import (
    AliasError,
    ConfigurationError,
    InvalidInputError,
    PrimitiveUnavailableError,
)

__version__ = "0.1.0"
__all__ = [
    "AliasError",
    "ConfigurationError",
    "InvalidInputError",
    "KeyedHashProvider",
    "ParsedAlias",
    "PrimitiveUnavailableError",
    "generate_email_alias",
    "generate_email_alias_async",
    "parse_alias",
    "resolve_provider",
    "validate_email_alias",
    "validate_email_alias_async",
]
