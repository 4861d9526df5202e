"""
Exceptions raised by input_guard.

Validators never raise for string input; these surface only from direct
``sanitize()`` calls and from the field registry.
"""

from __future__ import annotations


class SanitizationError(Exception):
    """Base class for input_guard errors."""


class InputTooLargeError(SanitizationError):
    """Raw input exceeds the configured size or nesting limit."""

    def __init__(self, length: int, limit: int, reason: str = "length") -> None:
        self.length = length
        self.limit = limit
        self.reason = reason
        if reason == "passes":
            msg = f"Input did not stabilise within {limit} sanitizer passes (length {length})"
        else:
            msg = f"Input length {length} exceeds limit of {limit} characters"
        super().__init__(msg)


class UnknownFieldError(SanitizationError, KeyError):
    """No validator is registered for the requested field kind."""

    def __init__(self, kind: str, known: tuple[str, ...]) -> None:
        self.kind = kind
        self.known = known
        super().__init__(f"Unknown field kind {kind!r}; expected one of {', '.join(known)}")

    def __str__(self) -> str:
        return str(self.args[0])
