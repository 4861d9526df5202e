"""Shared utilities for the input_guard package."""

from input_guard.utils.logging import configure_logging

__all__ = ["configure_logging"]
