# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Substituted when SECRET_KEY is not set; refused in production.
INSECURE_SECRET_KEY = "insecure-dev-secret-key-change-me"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default so the app starts with no
    configuration at all. Production mode requires a real SECRET_KEY.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    PORT: int = Field(
        default=7000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default=INSECURE_SECRET_KEY,
        min_length=16,
        description="Secret key for signing session tokens"
    )

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    SESSION_BACKEND: Literal["memory", "redis"] = Field(
        default="memory",
        description="Where session payloads are stored"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="commentboard.sess",
        min_length=1,
        description="Name of the cookie carrying the signed session token"
    )

    SESSION_MAX_AGE: int = Field(
        default=86400,
        ge=60,
        description="Session lifetime in seconds (cookie, token and storage TTL)"
    )

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the redis session backend"
    )

    REDIS_KEY_PREFIX: str = Field(
        default="commentboard:session:",
        description="Key prefix for session payloads stored in Redis"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_secret_in_production(self) -> "Settings":
        if self.ENVIRONMENT == "production" and self.SECRET_KEY == INSECURE_SECRET_KEY:
            raise ValueError("SECRET_KEY must be set when ENVIRONMENT=production")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def uses_insecure_secret(self) -> bool:
        return self.SECRET_KEY == INSECURE_SECRET_KEY


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
