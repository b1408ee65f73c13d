"""Application configuration with environment validation.

Usage:
    from swimqualifiers.config import get_settings

    settings = get_settings()
    print(settings.standards_file)
    print(settings.data_folder)

Every setting can be provided as an environment variable (case-insensitive)
or in a .env file in the working directory, e.g.:

    STANDARDS_FILE=standards/2025_provincials.xlsx
    DATA_FOLDER=meets
    OUTPUT_FILE=out/qualifier_counts.xlsx
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment, tagged on every log entry
    environment: Environment = Environment.LOCAL

    # Inputs
    standards_file: Path = Field(
        default=Path("timestandards.xlsx"), description="Qualifying time standards workbook"
    )
    data_folder: Path = Field(default=Path("data"), description="Folder holding meet result files")
    meet_file_prefix: str = Field(
        default="CAN-MBSK_", description="File name prefix identifying meet result workbooks"
    )

    # Output
    output_file: Path = Field(
        default=Path("qualifier_counts.xlsx"), description="Qualifier count workbook to write"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat | None = Field(
        default=None, description="Log output format (default: json in production, else console)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()
    """
    return Settings()
