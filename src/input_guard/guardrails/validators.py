"""
Field registry: one validator per kind of user-supplied field.

Callers that receive a whole form can validate it in one call with
``validate_fields`` instead of wiring each validator by hand.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

import structlog

from input_guard.errors import UnknownFieldError
from input_guard.guardrails.chat import validate_chat_input
from input_guard.guardrails.identity import validate_email, validate_password, validate_username
from input_guard.guardrails.result import ValidationResult

logger = structlog.get_logger(__name__)

Validator = Callable[[Optional[str]], ValidationResult]

FIELD_VALIDATORS: Mapping[str, Validator] = MappingProxyType(
    {
        "chat": validate_chat_input,
        "username": validate_username,
        "password": validate_password,
        "email": validate_email,
    }
)


def validate_field(kind: str, value: Optional[str]) -> ValidationResult:
    """Run the validator registered for ``kind``. Raises UnknownFieldError for unregistered kinds."""
    try:
        validator = FIELD_VALIDATORS[kind]
    except KeyError:
        raise UnknownFieldError(kind, tuple(FIELD_VALIDATORS)) from None
    return validator(value)


def validate_fields(values: Mapping[str, Optional[str]]) -> Dict[str, ValidationResult]:
    """Validate every entry of ``values``; results keep the input order."""
    results = {kind: validate_field(kind, value) for kind, value in values.items()}
    failed = [kind for kind, r in results.items() if not r.valid]
    if failed:
        logger.info("fields_rejected", fields=failed, total=len(results))
    return results
