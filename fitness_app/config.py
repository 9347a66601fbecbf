"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application settings derived from environment variables."""

    app_name: str = Field(
        default="FitnessApp",
        description="Name shown in the main menu banner.",
    )

    log_level: str = Field(default="WARNING")
    log_dir: Path = Field(default=Path("logs"))
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to <log_dir>/fitness_app.log.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.strip().upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    return Settings()
