"""Typed exceptions raised by the alias codec, its providers and config."""


class AliasError(ValueError):
    """Base class for alias related errors."""


class InvalidInputError(AliasError):
    """Raised when alias generation receives unusable arguments."""


class ConfigurationError(AliasError):
    """Raised when configuration is incomplete, e.g. a required secret is missing."""


class PrimitiveUnavailableError(RuntimeError):
    """Raised when no keyed-hash primitive can be obtained."""
