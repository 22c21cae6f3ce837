"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables or a local .env file.
"""

import json
from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Ballot"
    APP_ENV: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = ""  # Required - shared with the identity provider

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_required_secrets(cls, v: str, info: Any) -> str:
        """Validate that required secrets are set."""
        if not v:
            raise ValueError(f"{info.field_name} must be set in environment")
        return v

    # Identity tokens (issued by the external identity provider)
    JWT_ALGORITHM: str = "HS256"
    TOKEN_ISSUER: str = "ballot-identity"
    TOKEN_AUDIENCE: str = "ballot-api"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Database
    # PostgreSQL in production (postgresql+asyncpg://...), SQLite for local dev
    DATABASE_URL: str = "sqlite+aiosqlite:///./ballot.db"
    DATABASE_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # CORS - stored as comma-separated string to avoid pydantic-settings JSON parsing issues
    CORS_ORIGINS: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except json.JSONDecodeError:
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
