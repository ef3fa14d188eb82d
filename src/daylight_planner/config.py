"""Application settings.

Values come from ``DAYLIGHT_*`` environment variables or a ``.env`` file in the
working directory. Use :func:`get_settings` rather than instantiating
:class:`Settings` directly so the whole process shares one instance.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI, flows and service wiring."""

    model_config = SettingsConfigDict(
        env_prefix="DAYLIGHT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "Daylight Planner"
    app_env: str = "development"
    debug: bool = False

    # Storage
    database_url: str = Field(
        default="sqlite+pysqlite:///daylight.db",
        description="SQLAlchemy URL of the record store.",
    )

    # Upstream providers
    sunrise_api_base_url: str = "https://api.sunrise-sunset.org"
    sunrise_api_timeout: float = Field(default=15.0, gt=0, description="Seconds per day request")
    geocoding_api_base_url: str = "https://nominatim.openstreetmap.org"
    geocoding_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "daylight-planner/0.1 (https://github.com/daylight-planner/daylight-planner)"

    # Batch fetching
    batch_size: int = Field(default=10, ge=1, description="Missing dates fetched per batch")
    request_delay: float = Field(default=0.05, ge=0, description="Pause between day requests")
    batch_delay: float = Field(default=0.2, ge=0, description="Pause between batches")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
