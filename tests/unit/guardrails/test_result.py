"""Unit tests for ValidationResult, RejectionReason and the rejected() helper."""

import pytest
from pydantic import ValidationError

from input_guard.guardrails.result import RejectionReason, ValidationResult, rejected


def test_ok_result() -> None:
    r = ValidationResult.ok()
    assert r.valid is True
    assert r.error is None
    assert r.sanitized is None
    assert bool(r) is True


def test_ok_result_with_sanitized_text() -> None:
    assert ValidationResult.ok(sanitized="hi").sanitized == "hi"


def test_reject_uses_reason_text() -> None:
    r = ValidationResult.reject(RejectionReason.EMAIL_TOO_LONG)
    assert r.valid is False
    assert r.error == "Email is too long"
    assert bool(r) is False


def test_result_is_frozen() -> None:
    r = ValidationResult.ok()
    with pytest.raises(ValidationError):
        r.valid = False


def test_dump_omits_unset_fields() -> None:
    assert ValidationResult.ok().model_dump(exclude_none=True) == {"valid": True}
    assert ValidationResult.reject(RejectionReason.PASSWORD_REQUIRED).model_dump(exclude_none=True) == {
        "valid": False,
        "error": "Password is required",
    }


def test_reasons_are_unique() -> None:
    values = [r.value for r in RejectionReason]
    assert len(values) == len(set(values))


def test_reason_is_str() -> None:
    assert RejectionReason.INPUT_TOO_LARGE == "Input too large"


def test_rejected_helper_builds_rejection() -> None:
    r = rejected("chat", RejectionReason.MESSAGE_EMPTY, length=0)
    assert r == ValidationResult(valid=False, error="Message cannot be empty")
