"""Tests for salt generation, credential hashing and the ownership guard."""

import base64
import string

import pytest

from src.config import get_settings
from src.exceptions import AuthorizationError
from src.services.auth import ensure_owner
from src.services.security import (
    SALT_BYTES,
    credentials_match,
    generate_salt,
    hash_credential,
)


def test_salt_is_base64_of_128_random_bytes():
    """Test salt encoding and length."""
    salt = generate_salt()
    assert len(base64.b64decode(salt)) == SALT_BYTES


def test_salts_are_fresh_each_call():
    """Test that no two salts repeat."""
    salts = {generate_salt() for _ in range(50)}
    assert len(salts) == 50


def test_hash_is_deterministic():
    """Test that the same salt and secret always give the same hash."""
    salt = generate_salt()
    first = hash_credential(salt, "secret123")
    assert hash_credential(salt, "secret123") == first
    assert hash_credential(salt, "secret123") == first


def test_hash_is_hex_sha256():
    digest = hash_credential("salt", "secret")
    assert len(digest) == 64
    assert set(digest) <= set(string.hexdigits.lower())


def test_different_salts_give_different_hashes():
    """Test that the salt changes the hash for an identical secret."""
    assert hash_credential(generate_salt(), "secret123") != hash_credential(
        generate_salt(), "secret123"
    )


def test_different_secrets_give_different_hashes():
    salt = generate_salt()
    assert hash_credential(salt, "secret123") != hash_credential(salt, "secret124")


def test_hash_depends_on_server_secret():
    """Test that the server key is mixed in."""
    salt = generate_salt()
    configured = hash_credential(salt, "secret123")
    other_key = hash_credential(salt, "secret123", server_secret="another-server-secret")
    assert configured != other_key
    server_secret = get_settings().auth_secret
    assert configured == hash_credential(salt, "secret123", server_secret=server_secret)


def test_credentials_match():
    digest = hash_credential("salt", "secret")
    assert credentials_match(digest, hash_credential("salt", "secret"))
    assert not credentials_match(digest, hash_credential("salt", "other"))
    assert not credentials_match(digest, "")


def test_ensure_owner_allows_same_identity():
    ensure_owner(7, 7)


def test_ensure_owner_rejects_other_identity():
    """Test that a different id is an authorization failure."""
    with pytest.raises(AuthorizationError):
        ensure_owner(7, 8)


def test_slash_in_salt_does_not_shift_into_secret():
    """Test that moving a "/" between salt and secret changes the hash."""
    assert hash_credential("ab/cd", "ef") != hash_credential("ab", "cd/ef")
    assert hash_credential("ab/", "cd") != hash_credential("ab", "/cd")
