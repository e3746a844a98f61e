"""
Configuration management for the Event Reminder API.

This module handles all application settings loaded from environment variables,
providing type-safe configuration with validation and defaults.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- Separate sections for different concerns (database, app, server, security)
- Properties for computed values (is_production, is_development)
"""

from typing import Any, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: DATABASE_URL=sqlite:///./other.db uvicorn src.main:app
    """

    # ===== Database Configuration =====
    database_url: str = Field(
        default="sqlite:///./events.db",
        description="SQLAlchemy URL of the relational store"
    )
    sql_echo: bool = Field(
        default=False,
        description="Echo SQL statements emitted by SQLAlchemy"
    )

    # ===== Application Settings =====
    app_env: str = Field(
        default="development",
        pattern="^(development|staging|production|test)$",
        description="Application environment"
    )
    log_level: str = Field(
        default="info",
        pattern="^(debug|info|warning|error|critical)$",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )
    api_prefix: str = Field(
        default="",
        description="Path prefix the events router is mounted under, e.g. /api"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind host"
    )
    server_port: int = Field(
        default=8080,
        ge=1024, le=65535,
        description="Server port"
    )

    # ===== Security Configuration =====
    cors_origins: Union[str, list[str]] = Field(
        default="",
        description="Allowed CORS origins - comma-separated string or list"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL is not empty."""
        if not v or v.strip() == "":
            raise ValueError("database_url cannot be empty")
        return v.strip()

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Strip trailing slashes and force a leading slash on non-empty prefixes."""
        v = (v or "").strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: Any) -> list[str]:
        """Accept a comma-separated string or a list of origins."""
        if value in (None, ""):
            return []
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return [str(origin) for origin in value]

    @model_validator(mode="after")
    def validate_cors_origins(self) -> "Settings":
        """Reject wildcard CORS in production and apply the frontend default."""
        if self.app_env == "production" and "*" in self.cors_origins:
            raise ValueError("CORS wildcard not allowed in production")

        # Angular dev server
        if not self.cors_origins:
            self.cors_origins = ["http://localhost:4200"]

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )


# Singleton instance - loaded once at module import
settings = Settings()
