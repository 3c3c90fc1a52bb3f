"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_PSEUDONYM_SECRET: str = Field(...)
    BANANA_STAND_LOG_LEVEL: str = Field(default="info")
    BANANA_STAND_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("/data"))

    # Skill verification; unset disables the applicationId check.
    SKILL_ID: str | None = Field(default=None)

    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=True)

    REMINDERS_API_TIMEOUT_SECONDS: float = Field(default=10.0)


settings = Settings()  # type: ignore[call-arg]
config = settings  # Alias used by route modules


__all__ = ["Settings", "settings", "config"]
