from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the FastAPI service.

    This is separate from scheduling_api.db.config.Settings, which focuses on the database layer.
    """

    # FastAPI metadata
    APP_NAME: str = Field(default="Scheduling API")
    APP_DESCRIPTION: str = Field(
        default=(
            "Backend API for a multi-tenant scheduling/CRM product. "
            "Provides tenant-scoped client management with role-based authorization."
        )
    )
    APP_VERSION: str = Field(default="0.1.0")

    # Token verification (tokens are issued by an external identity service)
    JWT_SECRET_KEY: str = Field(default="change-me", description="HMAC secret used to sign JWTs")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60)

    # Startup behavior
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=True,
        description="If true, run Alembic migrations (upgrade head) at app startup.",
    )
    AUTO_SEED: bool = Field(
        default=False,
        description="If true, seed demo clients for DEFAULT_TENANT_ID after migrations.",
    )

    # Tenancy defaults (used only by seeding)
    DEFAULT_TENANT_ID: str = Field(default="demo")

    # Error responses
    EXPOSE_ERROR_DETAILS: bool = Field(
        default=True,
        description="If true, unexpected errors echo their message in the response details.",
    )

    LOG_LEVEL: str = Field(default="INFO")

    # Environment label
    ENVIRONMENT: Optional[str] = Field(
        default=None, description="Environment label (dev/test/prod)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        """Accept level names in any case; fall back to INFO."""
        if not v:
            return "INFO"
        return str(v).strip().upper()


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.

    Note:
      A new instance is built on each call so tests can adjust the environment.
    """
    return AppSettings()
