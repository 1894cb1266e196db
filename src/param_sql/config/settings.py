"""
Configuration management for param_sql.

Settings are loaded from environment variables (``PARAM_SQL_`` prefix) and an
optional ``.env`` file using Pydantic BaseSettings. The builders themselves are
pure; configuration only affects logging and the opt-in sort direction check.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("PARAM_SQL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Environment variables are loaded with the PARAM_SQL_ prefix, so
    PARAM_SQL_STRICT_SORT_DIRECTION=true enables the sort direction check.
    LOG_LEVEL is read without a prefix to match the host application.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to a daily rotating file",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for log files when log_to_file is enabled",
    )
    strict_sort_direction: bool = Field(
        default=False,
        description="Reject sort directions other than ASC/DESC",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="PARAM_SQL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
