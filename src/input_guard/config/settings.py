"""
Input Guard Settings Configuration

This module provides centralized configuration management using Pydantic settings.
Configuration is loaded from environment variables and .env by default; alternative
YAML loading is supported.

Only boundary hardening limits and logging are configurable. The acceptance
thresholds of the chat and identity validators are fixed behaviour and live as
constants next to the rules that use them.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SanitizerSettings(BaseSettings):
    """
    Boundary limits applied before any pattern runs: maximum raw input length
    and maximum number of fixed-point passes.
    """

    model_config = SettingsConfigDict(env_prefix="SANITIZER_", extra="ignore")

    max_input_length: int = Field(
        default=32768,
        ge=1,
        description="Raw inputs longer than this are refused before sanitizing",
    )
    max_passes: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Passes allowed before nested input is treated as too large",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration: level, format (json/console), and log file path."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="console", description="Format: 'json' or 'console'")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class Settings(BaseSettings):
    """
    Root settings class. Loads from .env by default; supports creation from YAML.

    Nested models: sanitizer, logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    sanitizer: SanitizerSettings = Field(default_factory=SanitizerSettings, description="Sanitizer limits")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (sanitizer, logging).
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("sanitizer", SanitizerSettings),
            ("logging", LoggingSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance (loads from .env)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Force reload of settings from environment."""
    global _settings
    _settings = Settings()
    return _settings
