"""
Username, password and email validators.

These judge identity fields and never rewrite them: on acceptance the caller
keeps using the original string. Password strength policy belongs to the
identity provider, so only length is checked here.
"""

from __future__ import annotations

import re
from typing import Optional

from input_guard.config.settings import get_settings
from input_guard.guardrails.result import RejectionReason, ValidationResult, rejected

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
EMAIL_MAX_LENGTH = 254

_USERNAME_RE = re.compile(r"[a-zA-Z0-9._-]+")
# Syntactic sanity check only: local@domain.tld with no whitespace
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_username(username: Optional[str]) -> ValidationResult:
    if not username or not username.strip():
        return rejected("username", RejectionReason.USERNAME_REQUIRED)
    if len(username) < USERNAME_MIN_LENGTH:
        return rejected("username", RejectionReason.USERNAME_TOO_SHORT, length=len(username))
    if len(username) > USERNAME_MAX_LENGTH:
        return rejected("username", RejectionReason.USERNAME_TOO_LONG, length=len(username))
    if not _USERNAME_RE.fullmatch(username):
        return rejected("username", RejectionReason.USERNAME_INVALID_CHARACTERS)
    return ValidationResult.ok()


def validate_password(password: Optional[str]) -> ValidationResult:
    if not password:
        return rejected("password", RejectionReason.PASSWORD_REQUIRED)
    if len(password) < PASSWORD_MIN_LENGTH:
        return rejected("password", RejectionReason.PASSWORD_TOO_SHORT)
    if len(password) > PASSWORD_MAX_LENGTH:
        return rejected("password", RejectionReason.PASSWORD_TOO_LONG)
    return ValidationResult.ok()


def validate_email(email: Optional[str]) -> ValidationResult:
    """
    Check that ``email`` looks like ``local@domain.tld``.

    Not RFC 5322 validation. The format check runs before the length check, so
    an oversized but well-shaped address reports ``Email is too long``. Input
    beyond the sanitizer size limit is refused before the regex runs.
    """
    if not email or not email.strip():
        return rejected("email", RejectionReason.EMAIL_REQUIRED)
    limit = get_settings().sanitizer.max_input_length
    if len(email) > limit:
        return rejected("email", RejectionReason.INPUT_TOO_LARGE, length=len(email), limit=limit)
    if not _EMAIL_RE.fullmatch(email):
        return rejected("email", RejectionReason.EMAIL_INVALID_FORMAT)
    if len(email) > EMAIL_MAX_LENGTH:
        return rejected("email", RejectionReason.EMAIL_TOO_LONG, length=len(email))
    return ValidationResult.ok()
