"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from input_guard.config import settings as settings_module


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "adversarial: obfuscated or nested attack payloads")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the cached Settings so each test reads its own environment."""
    monkeypatch.setattr(settings_module, "_settings", None)


@pytest.fixture(autouse=True)
def reset_structlog() -> None:
    """Undo any structlog.configure() a test or the CLI performed."""
    yield
    structlog.reset_defaults()
