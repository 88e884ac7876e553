"""Tests for app/core/security.py - password hashing."""

from app.core.security import PasswordHasher, get_password_hasher


def test_hash_is_not_plaintext():
    hasher = PasswordHasher(rounds=1000)

    digest = hasher.hash("secret1")

    assert digest != "secret1"
    assert digest.startswith("$pbkdf2-sha256$")


def test_hash_is_salted():
    hasher = PasswordHasher(rounds=1000)

    assert hasher.hash("secret1") != hasher.hash("secret1")


def test_verify():
    hasher = PasswordHasher(rounds=1000)
    digest = hasher.hash("secret1")

    assert hasher.verify("secret1", digest) is True
    assert hasher.verify("Secret1", digest) is False


def test_verify_malformed_digest():
    hasher = PasswordHasher(rounds=1000)

    assert hasher.verify("secret1", "not-a-hash") is False


def test_get_password_hasher_is_cached():
    assert get_password_hasher() is get_password_hasher()
