"""Alias codec: generation and validation of keyed email aliases."""

from .encoder import (
    DEFAULT_HASH_LENGTH,
    MAX_HASH_LENGTH,
    build_local_prefix,
    canonical_message,
    compute_digest,
    generate_email_alias,
    key_bytes,
)
from .validator import ParsedAlias, constant_time_equals, parse_alias, validate_email_alias

__all__ = [
    "DEFAULT_HASH_LENGTH",
    "MAX_HASH_LENGTH",
    "ParsedAlias",
    "build_local_prefix",
    "canonical_message",
    "compute_digest",
    "constant_time_equals",
    "generate_email_alias",
    "key_bytes",
    "parse_alias",
    "validate_email_alias",
]
