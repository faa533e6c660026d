"""Typer-based command line interface for generating and checking aliases.

The secret key is read from the environment variable named in the
configuration (``EMAIL_ALIAS_SECRET`` by default) and is never accepted as a
command line argument, so it does not end up in shell history.

Exit codes
----------
0 success (alias generated, or alias valid)
1 alias invalid
3 input error (bad alias parts, missing domain, bad hash length)
4 configuration error (unreadable or invalid config, missing secret)
5 keyed-hash primitive unavailable
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .codec.encoder import generate_email_alias
from .codec.validator import validate_email_alias
from .config import ConfigModel, ensure_secret_present, get_secret_bytes, load_config
from .crypto.provider import KeyedHashProvider, resolve_provider
from .utils.errors import ConfigurationError, InvalidInputError, PrimitiveUnavailableError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="email-alias",
    help=(
        "Create and verify keyed email aliases. Use 'email-alias generate' to mint an "
        "alias and 'email-alias validate' to check one."
    ),
)

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> tuple[ConfigModel, bytes]:
    """Load configuration and the required secret, exiting with 4 on failure."""

    try:
        cfg = load_config(config_path)
        ensure_secret_present(cfg, strict=True)
        secret = get_secret_bytes(cfg)
    except (ValidationError, ConfigurationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    return cfg, secret


def _provider(cfg: ConfigModel) -> KeyedHashProvider:
    try:
        return resolve_provider(cfg.crypto.provider)
    except PrimitiveUnavailableError as exc:
        _safe_exit(5, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the email-alias command group."""
    pass


@app.command()
def generate(
    parts: list[str] = typer.Argument(  # noqa: B008
        ..., help="Alias parts, e.g. 'shop amazon'"
    ),
    domain: Optional[str] = typer.Option(  # noqa: B008
        None, "--domain", "-d", help="Domain appended after '@' (defaults to config)"
    ),
    hash_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--hash-length", "-n", help="Hex characters kept from the digest"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Print the alias for PARTS under the configured secret key."""

    configure_logging(verbose)
    cfg, secret = _load(config_path)
    provider = _provider(cfg)

    target_domain = domain if domain is not None else cfg.alias.domain
    if not target_domain:
        _safe_exit(3, "No domain given; pass --domain or set alias.domain in the config")
    length = hash_length if hash_length is not None else cfg.alias.hash_length

    try:
        alias = generate_email_alias(secret, parts, target_domain, length, provider=provider)
    except InvalidInputError as exc:
        _safe_exit(3, str(exc))
    except PrimitiveUnavailableError as exc:
        _safe_exit(5, str(exc))
    typer.echo(alias)


@app.command()
def validate(
    alias: str = typer.Argument(..., help="Alias to check"),  # noqa: B008
    hash_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--hash-length", "-n", help="Hex characters expected in the digest"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Print 'valid' or 'invalid' for ALIAS; exit 1 when invalid."""

    configure_logging(verbose)
    cfg, secret = _load(config_path)
    provider = _provider(cfg)
    length = hash_length if hash_length is not None else cfg.alias.hash_length

    try:
        ok = validate_email_alias(secret, alias, length, provider=provider)
    except PrimitiveUnavailableError as exc:
        _safe_exit(5, str(exc))
    log.debug("Validation finished with provider %s", provider.name)
    typer.echo("valid" if ok else "invalid")
    if not ok:
        raise typer.Exit(1)
