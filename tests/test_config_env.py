from pathlib import Path
from typing import Any

import pytest

from email_alias.config import ensure_secret_present, get_secret_bytes, load_config
from email_alias.utils.errors import ConfigurationError


def test_env_secret(monkeypatch: Any) -> None:
    monkeypatch.setenv("EMAIL_ALIAS_SECRET", "test-secret")
    cfg = load_config()
    assert cfg.secret.secret is not None
    assert cfg.secret.secret.get_secret_value() == "test-secret"
    assert get_secret_bytes(cfg) == b"test-secret"


def test_secret_not_in_repr(monkeypatch: Any) -> None:
    monkeypatch.setenv("EMAIL_ALIAS_SECRET", "hunter2")
    cfg = load_config()
    assert "hunter2" not in repr(cfg)


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('secret:\n  secret_env: "CUSTOM_ENV"\nalias:\n  domain: "mail.test"\n')
    monkeypatch.setenv("CUSTOM_ENV", "custom")
    cfg = load_config(cfg_file)
    assert cfg.secret.secret_env == "CUSTOM_ENV"
    assert cfg.secret.secret is not None
    assert cfg.secret.secret.get_secret_value() == "custom"
    assert cfg.alias.domain == "mail.test"
    assert cfg.alias.hash_length == 8


def test_empty_env_value_is_missing() -> None:
    cfg = load_config(env={"EMAIL_ALIAS_SECRET": ""})
    assert cfg.secret.secret is None


def test_ensure_secret_present() -> None:
    cfg = load_config(env={})
    assert ensure_secret_present(cfg, strict=False) is False
    with pytest.raises(ConfigurationError):
        ensure_secret_present(cfg, strict=True)


def test_ensure_secret_present_env() -> None:
    cfg = load_config(env={"EMAIL_ALIAS_SECRET": "unit-test-secret"})
    assert ensure_secret_present(cfg, strict=True) is True
