"""
input_guard: sanitization and validation of untrusted user input.

Scrubs dangerous markup and URL schemes from chat text and enforces acceptance
rules on chat messages, usernames, passwords, and email addresses before a
caller persists or forwards them.
"""

from input_guard.guardrails import (
    FIELD_VALIDATORS,
    RejectionReason,
    Sanitizer,
    ValidationResult,
    sanitize,
    validate_chat_input,
    validate_email,
    validate_field,
    validate_fields,
    validate_password,
    validate_username,
)

__version__ = "0.1.0"

__all__ = [
    "FIELD_VALIDATORS",
    "RejectionReason",
    "Sanitizer",
    "ValidationResult",
    "sanitize",
    "validate_chat_input",
    "validate_email",
    "validate_field",
    "validate_fields",
    "validate_password",
    "validate_username",
]
