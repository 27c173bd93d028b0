"""
convenia-util - Configuration Module

Formatting defaults and logging settings, overridable from the
environment with Pydantic settings.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    CONSOLE = "console"


class FormatConfig(BaseSettings):
    """Defaults used by the formatters."""

    model_config = SettingsConfigDict(
        env_prefix="CONVENIA_",
        extra="ignore"
    )

    currency_prefix: str = Field(default="R$ ")
    date_output_format: str = Field(default="DD/MM/YYYY")
    empty_char: str = Field(default="-")
    interval_separator: str = Field(default=" a ")

    @field_validator("date_output_format")
    @classmethod
    def require_output_format(cls, v):
        if not v.strip():
            raise ValueError("date_output_format must not be empty")
        return v


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(default="INFO")
    format: LogFormat = Field(default=LogFormat.CONSOLE)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AppConfig(BaseSettings):
    """Main configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    format: FormatConfig = Field(default_factory=FormatConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from the environment."""
        return cls(
            format=FormatConfig(),
            log=LogConfig(),
        )


def load_config() -> AppConfig:
    """Load configuration."""
    return AppConfig.from_env()


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the global instance so the next get_config() reloads it."""
    global _config
    _config = None
