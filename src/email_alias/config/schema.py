"""Typed configuration schema and loader for the email_alias package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint

from ..utils.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class AliasSettings(BaseModel):
    """Defaults applied when generating or validating aliases."""

    domain: str | None = None
    hash_length: conint(ge=1, le=64) = 8  # type: ignore[valid-type]

    model_config = ConfigDict(extra="forbid")


class SecretSettings(BaseModel):
    """Where the HMAC secret key comes from."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class CryptoSettings(BaseModel):
    """Keyed-hash provider selection."""

    provider: Literal["auto", "hmac", "cryptography"] = "auto"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    alias: AliasSettings
    secret: SecretSettings
    crypto: CryptoSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable holding the secret key.
    """

    with (
        importlib_resources.files("email_alias.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.secret.secret_env
    if environ.get(secret_env):
        cfg.secret.secret = SecretStr(environ[secret_env])

    return cfg


def get_secret_bytes(cfg: ConfigModel, *, require: bool = False) -> bytes:
    """Return the secret key as UTF-8 bytes.

    Parameters
    ----------
    cfg:
        Configuration model holding the secret.
    require:
        If ``True`` and the secret is missing, :class:`ConfigurationError` is
        raised.

    Notes
    -----
    This function never logs or prints the secret.
    """

    secret = cfg.secret.secret
    if secret is None or not secret.get_secret_value():
        if require:
            raise ConfigurationError(
                f"Missing secret key; set the {cfg.secret.secret_env} environment variable"
            )
        return b""
    return secret.get_secret_value().encode("utf-8")


def ensure_secret_present(cfg: ConfigModel, *, strict: bool) -> bool:
    """Return whether a secret is configured, raising in ``strict`` mode."""

    present = bool(get_secret_bytes(cfg, require=strict))
    return present


__all__ = [
    "ConfigModel",
    "AliasSettings",
    "SecretSettings",
    "CryptoSettings",
    "deep_merge_dicts",
    "load_config",
    "get_secret_bytes",
    "ensure_secret_present",
]
