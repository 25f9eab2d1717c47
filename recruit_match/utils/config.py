"""
Settings for Recruit Match.

Each section reads its own environment prefix (APP_, DB_, MATCH_, LOG_);
APP_ values may also come from a .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recruit_match.utils.constants import DEFAULT_MIN_SCORE


# Repository root; default log paths hang off it
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB connection."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "recruit_match"
    username: str | None = None
    password: str | None = None


class MatchingSettings(BaseSettings):
    """Matching engine configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    default_min_score: int = Field(default=DEFAULT_MIN_SCORE, ge=0, le=100)

    # Pools larger than this are scored on a thread pool
    parallel_threshold: int = Field(default=200, ge=1)
    max_workers: int = Field(default=4, ge=1)


class LoggingSettings(BaseSettings):
    """Loguru sinks."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "recruit_match.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Top-level settings holding one instance of each section."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    environment: Literal["development", "production", "testing"] = "development"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Re-read the environment and replace the process-wide settings."""
    global _settings
    _settings = AppSettings()
    return _settings
