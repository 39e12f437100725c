"""
Configuration management for gradespec.

Uses Pydantic Settings for type-safe configuration loading from environment variables.
All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be overridden with a ``GRADESPEC_`` prefixed variable,
    e.g. ``GRADESPEC_CONFIG_FILE=grading.txt``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GRADESPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Source Configuration
    # ==========================================================================
    config_file: Path = Field(
        default=Path("config/gatorgrader.yml"),
        description="Grading config file used when no path is given",
    )

    file_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding used to read grading config files",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================
    log_level: LogLevel = Field(
        default="WARNING",
        description="Level for the gradespec package logger",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
