"""
Validation verdicts shared by the sanitizer-backed chat validator and the
identity field validators.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)


class RejectionReason(str, Enum):
    """Every rejection message a validator can emit. Callers surface these verbatim."""

    INPUT_TOO_LARGE = "Input too large"

    MESSAGE_EMPTY = "Message cannot be empty"
    MESSAGE_TOO_LONG = "Message too long (maximum 4000 characters)"
    MESSAGE_SPECIAL_CHARACTERS = "Message contains too many special characters"
    MESSAGE_REPEATED_CHARACTERS = "Message contains excessive repeated characters"

    USERNAME_REQUIRED = "Username is required"
    USERNAME_TOO_SHORT = "Username must be at least 3 characters"
    USERNAME_TOO_LONG = "Username must be less than 50 characters"
    USERNAME_INVALID_CHARACTERS = "Username can only contain letters, numbers, dots, underscores, and hyphens"

    PASSWORD_REQUIRED = "Password is required"
    PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
    PASSWORD_TOO_LONG = "Password must be less than 128 characters"

    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID_FORMAT = "Invalid email format"
    EMAIL_TOO_LONG = "Email is too long"


class ValidationResult(BaseModel):
    """Verdict of a single validator call. Built fresh per call, never shared."""

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(description="True if the input is accepted")
    error: Optional[str] = Field(default=None, description="Rejection message, set only when valid is False")
    sanitized: Optional[str] = Field(
        default=None,
        description="Scrubbed text to forward; set only by the chat validator on acceptance",
    )

    @classmethod
    def ok(cls, sanitized: Optional[str] = None) -> "ValidationResult":
        return cls(valid=True, sanitized=sanitized)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "ValidationResult":
        return cls(valid=False, error=reason.value)

    def __bool__(self) -> bool:
        return self.valid


def rejected(field: str, reason: RejectionReason, **context: Any) -> ValidationResult:
    """Build a rejection and log it. ``context`` must never carry the raw input."""
    logger.info("input_rejected", field=field, reason=reason.name, **context)
    return ValidationResult.reject(reason)
