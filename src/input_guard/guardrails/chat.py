"""
Chat message acceptance: sanitize first, then anti-abuse heuristics.

Rules run in order against the sanitized text and stop at the first failure.
The thresholds are fixed behaviour shared with existing clients; changing any
of them is a product decision.
"""

from __future__ import annotations

import re
from typing import Optional

from input_guard.errors import InputTooLargeError
from input_guard.guardrails.result import RejectionReason, ValidationResult, rejected
from input_guard.guardrails.sanitizer import Sanitizer

MAX_MESSAGE_LENGTH = 4000
MAX_SPECIAL_CHAR_RATIO = 0.5
# A run of this many identical characters is rejected; one fewer is allowed.
MAX_REPEAT_RUN = 11

# Anything outside letters, digits, whitespace and common punctuation
_SPECIAL_CHAR_RE = re.compile(r"""[^a-zA-Z0-9\s.,!?;:()\-'"]""")
# Line breaks never count toward a run, so blank lines between paragraphs are fine.
_REPEATED_CHAR_RE = re.compile(r"([^\n\r\u2028\u2029])\1{%d,}" % (MAX_REPEAT_RUN - 1))


def special_char_ratio(text: str) -> float:
    """Share of characters in ``text`` that are not letters, digits, whitespace or basic punctuation."""
    if not text:
        return 0.0
    return len(_SPECIAL_CHAR_RE.findall(text)) / len(text)


def validate_chat_input(text: Optional[str]) -> ValidationResult:
    """
    Accept or reject a chat message.

    On acceptance ``result.sanitized`` holds the text the caller should store or
    forward. Oversized raw input is rejected with ``Input too large`` before any
    pattern runs.
    """
    try:
        report = Sanitizer().scrub(text)
    except InputTooLargeError as e:
        return rejected("chat", RejectionReason.INPUT_TOO_LARGE, length=e.length, limit=e.limit)

    sanitized = report.text
    if not sanitized.strip():
        return rejected("chat", RejectionReason.MESSAGE_EMPTY, removed=report.removed)

    if len(sanitized) > MAX_MESSAGE_LENGTH:
        return rejected("chat", RejectionReason.MESSAGE_TOO_LONG, length=len(sanitized))

    ratio = special_char_ratio(sanitized)
    if ratio > MAX_SPECIAL_CHAR_RATIO:
        return rejected("chat", RejectionReason.MESSAGE_SPECIAL_CHARACTERS, ratio=round(ratio, 3))

    if _REPEATED_CHAR_RE.search(sanitized):
        return rejected("chat", RejectionReason.MESSAGE_REPEATED_CHARACTERS, length=len(sanitized))

    return ValidationResult.ok(sanitized=sanitized)
