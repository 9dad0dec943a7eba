"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./findit.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    vapid_public_key: str | None = Field(
        default=None,
        description="Public VAPID key handed to browsers when they subscribe to push",
    )
    vapid_private_key: str | None = Field(
        default=None,
        description="Private VAPID key used to sign Web Push requests",
    )
    vapid_subject: str = Field(
        default="mailto:support@findit.app",
        description="Contact URI sent in the VAPID claims",
        min_length=1,
    )
    default_radius_km: float = Field(
        default=5.0,
        description="Notification radius used when a subscription does not define one",
        gt=0,
    )
    push_max_workers: int = Field(
        default=8,
        description="Maximum number of concurrent Web Push deliveries per dispatch",
        gt=0,
    )
    push_timeout_seconds: float | None = Field(
        default=10.0,
        description="Upper bound for the whole push fan-out and for each push request",
        gt=0,
    )
    push_ttl_seconds: int = Field(
        default=86400,
        description="Time the push service should retain undelivered messages",
        ge=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @property
    def push_enabled(self) -> bool:
        """Return ``True`` when both VAPID keys are configured."""

        return bool(self.vapid_public_key and self.vapid_private_key)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
