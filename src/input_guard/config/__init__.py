"""Configuration for input_guard: boundary limits and logging."""

from input_guard.config.settings import (
    LoggingSettings,
    SanitizerSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = ["LoggingSettings", "SanitizerSettings", "Settings", "get_settings", "reload_settings"]
