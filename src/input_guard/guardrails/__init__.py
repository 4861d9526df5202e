"""
Input Guardrails

Sanitizer for untrusted text plus acceptance rules for chat messages,
usernames, passwords and email addresses. Every validator returns a
ValidationResult; rejections carry one of the RejectionReason messages.
"""

from input_guard.guardrails.chat import validate_chat_input
from input_guard.guardrails.identity import validate_email, validate_password, validate_username
from input_guard.guardrails.result import RejectionReason, ValidationResult
from input_guard.guardrails.sanitizer import (
    DANGEROUS_SCHEMES,
    DANGEROUS_TAGS,
    DEFAULT_RULES,
    SanitizationReport,
    Sanitizer,
    SanitizerRule,
    sanitize,
)
from input_guard.guardrails.validators import FIELD_VALIDATORS, validate_field, validate_fields

__all__ = [
    "DANGEROUS_SCHEMES",
    "DANGEROUS_TAGS",
    "DEFAULT_RULES",
    "FIELD_VALIDATORS",
    "RejectionReason",
    "SanitizationReport",
    "Sanitizer",
    "SanitizerRule",
    "ValidationResult",
    "sanitize",
    "validate_chat_input",
    "validate_email",
    "validate_field",
    "validate_fields",
    "validate_password",
    "validate_username",
]
