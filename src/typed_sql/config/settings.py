"""
Configuration management for typed-sql.

This module provides environment-based configuration using Pydantic BaseSettings.
The values here are only defaults: every factory and builder accepts explicit
arguments that take precedence over the configured ones.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TYPED_SQL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

SUPPORTED_DIALECTS = ("mysql", "sqlite")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the TYPED_SQL_ prefix, e.g.
    TYPED_SQL_DIALECT overrides the ``dialect`` setting. LOG_LEVEL is read
    without a prefix so it can be shared with the host application.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    dialect: str = Field(
        default="sqlite",
        description="Default dialect used by the factory when none is given",
    )
    camelize: bool = Field(
        default=False,
        description="Translate column names to camelCase at the assembler boundary",
    )
    like_escape_char: str = Field(
        default="\\",
        description="Default escape character for LIKE patterns",
    )

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, value: str) -> str:
        """Normalise the dialect name and reject unregistered ones."""
        normalized = value.strip().lower()
        if normalized == "mariadb":
            normalized = "mysql"
        if normalized not in SUPPORTED_DIALECTS:
            raise ValueError(
                f"Unsupported dialect '{value}', expected one of: "
                f"{', '.join(SUPPORTED_DIALECTS)}"
            )
        return normalized

    @field_validator("like_escape_char")
    @classmethod
    def validate_like_escape_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("like_escape_char must be exactly one character")
        return value

    model_config = SettingsConfigDict(
        env_prefix="TYPED_SQL_",
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
