"""Structured logging setup with structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, TextIO

import structlog

from input_guard.config.settings import LoggingSettings, get_settings


def _open_log_file(path: str) -> TextIO:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return open(log_path, "a", encoding="utf-8")


def configure_logging(settings: Optional[LoggingSettings] = None, **overrides: Any) -> None:
    """
    Configure structlog for the process.

    ``settings`` defaults to ``get_settings().logging``; keyword overrides
    (``log_level``, ``log_format``, ``log_file``) are validated the same way.
    Logs go to stderr unless ``log_file`` is set.
    """
    base = settings or get_settings().logging
    if overrides:
        base = LoggingSettings.model_validate({**base.model_dump(), **overrides})

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if base.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=base.log_file is None and sys.stderr.isatty()))

    stream = _open_log_file(base.log_file) if base.log_file else sys.stderr
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(base.log_level)),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
