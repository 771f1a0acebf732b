"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from src.config import Settings


def test_missing_auth_secret_is_fatal(monkeypatch):
    """Test that settings cannot be built without the server secret."""
    monkeypatch.delenv("AUTH_SECRET", raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./test.db")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.setenv("AUTH_SECRET", "test-server-secret")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cookie_name_default(monkeypatch):
    """Test the default session cookie name."""
    monkeypatch.setenv("AUTH_SECRET", "test-server-secret")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./test.db")
    monkeypatch.delenv("AUTH_COOKIE_NAME", raising=False)

    settings = Settings(_env_file=None)

    assert settings.auth_cookie_name == "AUTH-TOKEN"
    assert settings.is_development


def test_production_rejects_short_secret(monkeypatch):
    monkeypatch.setenv("AUTH_SECRET", "short")
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pass@db:5432/users")
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
