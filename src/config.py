"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(..., min_length=1)

    # Session authentication
    auth_secret: str = Field(..., min_length=1)
    auth_cookie_name: str = Field(default="AUTH-TOKEN")
    auth_cookie_domain: str | None = Field(default=None)
    auth_cookie_secure: bool = Field(default=False)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if len(self.auth_secret) < 32:
                raise ValueError("AUTH_SECRET must be at least 32 characters in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises pydantic's ValidationError when AUTH_SECRET or DATABASE_URL is
    missing, so the application refuses to start without them.
    """
    return Settings()
