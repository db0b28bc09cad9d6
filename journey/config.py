"""Calculator settings via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Journey calculator configuration.

    Values are loaded from ``JOURNEY_*`` environment variables, falling back to
    a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOURNEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: LogLevel = "WARNING"

    # Output: decimal digits for every rendered value
    precision: int = Field(default=2, ge=0, le=10)
    show_welcome: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton calculator settings."""
    return Settings()
