from __future__ import annotations

import pytest

from email_alias import generate_email_alias, parse_alias, validate_email_alias
from email_alias.codec import constant_time_equals

SECRET = "a-very-secret-key-that-is-long-enough"
DOMAIN = "example.com"


def test_valid_alias() -> None:
    alias = generate_email_alias(SECRET, ["finance", "chase-bank"], DOMAIN)
    assert validate_email_alias(SECRET, alias) is True


def test_tampered_hash() -> None:
    assert validate_email_alias(SECRET, "finance-chase-bank-ffffffff@example.com") is False


def test_every_digest_character_is_checked() -> None:
    alias = generate_email_alias(SECRET, ["work", "github"], DOMAIN)
    local, domain = alias.split("@")
    prefix, digest = local.rsplit("-", 1)
    for i, ch in enumerate(digest):
        flipped = "0" if ch != "0" else "1"
        tampered = f"{prefix}-{digest[:i]}{flipped}{digest[i + 1:]}@{domain}"
        assert validate_email_alias(SECRET, tampered) is False


def test_wrong_secret() -> None:
    alias = generate_email_alias(SECRET, ["work", "github"], DOMAIN)
    assert validate_email_alias("a-different-and-wrong-secret-key", alias) is False


def test_tampered_parts() -> None:
    alias = generate_email_alias(SECRET, ["original", "service"], DOMAIN)
    digest = alias.split("@")[0].split("-")[-1]
    assert validate_email_alias(SECRET, f"tampered-service-{digest}@example.com") is False


def test_custom_hash_length_round_trip() -> None:
    alias = generate_email_alias(SECRET, ["test", "length"], DOMAIN, hash_length=10)
    assert validate_email_alias(SECRET, alias, hash_length=10) is True


def test_hash_length_mismatch() -> None:
    alias10 = generate_email_alias(SECRET, ["test", "length-mismatch"], DOMAIN, hash_length=10)
    assert validate_email_alias(SECRET, alias10) is False
    alias8 = generate_email_alias(SECRET, ["test", "length-mismatch"], DOMAIN)
    assert validate_email_alias(SECRET, alias8, hash_length=10) is False


@pytest.mark.parametrize("n", [1, 8, 20, 64])
def test_round_trip_lengths(n: int) -> None:
    alias = generate_email_alias(SECRET, ["a", "b", "c"], "mail.example.org", hash_length=n)
    assert validate_email_alias(SECRET, alias, hash_length=n) is True


@pytest.mark.parametrize(
    "malformed",
    [
        "test-service@example.com",
        "test-service-12345678",
        "plainstring",
        "",
        None,
        42,
        b"news-service-12345678@example.com",
        "-12345678@example.com",
        "12345678@example.com",
        "news-12345678@",
        "news-1234567@example.com",
        "news-123456789@example.com",
        "news-ABCDEF12@example.com",
        "news-1234567g@example.com",
        "news-12345678@a@example.com",
    ],
)
def test_malformed_alias_is_false(malformed: object) -> None:
    assert validate_email_alias(SECRET, malformed) is False


@pytest.mark.parametrize("key", ["", None, 5])
def test_bad_secret_is_false(key: object) -> None:
    alias = generate_email_alias(SECRET, ["x"], DOMAIN)
    assert validate_email_alias(key, alias) is False  # type: ignore[arg-type]


@pytest.mark.parametrize("n", [0, 65, "8"])
def test_bad_hash_length_is_false(n: object) -> None:
    alias = generate_email_alias(SECRET, ["x"], DOMAIN)
    assert validate_email_alias(SECRET, alias, hash_length=n) is False  # type: ignore[arg-type]


def test_parts_containing_hyphen_validate_from_prefix() -> None:
    alias = generate_email_alias(SECRET, ["with-dash", "x"], DOMAIN)
    same_prefix = generate_email_alias(SECRET, ["with", "dash", "x"], DOMAIN)
    assert alias == same_prefix
    assert validate_email_alias(SECRET, alias) is True


def test_parse_alias() -> None:
    parsed = parse_alias("shop-amazon-0123abcd@example.com")
    assert parsed is not None
    assert parsed.prefix == "shop-amazon"
    assert parsed.digest == "0123abcd"
    assert parsed.domain == "example.com"
    assert parsed.parts == ["shop", "amazon"]
    assert parse_alias("shop-amazon-0123abcd@example.com", hash_length=6) is None


def test_constant_time_equals() -> None:
    assert constant_time_equals("abcd", "abcd") is True
    assert constant_time_equals("abcd", "abce") is False
    assert constant_time_equals("abcd", "abc") is False
