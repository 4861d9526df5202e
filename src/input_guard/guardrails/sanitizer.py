"""
Denylist sanitizer for untrusted text.

Removes dangerous URL schemes, dangerous tags, script/style element bodies and
inline event-handler attributes. Rules live in one immutable table; a single
engine applies the whole table repeatedly until the text reaches a fixed point,
so a construct unmasked by an earlier removal (``<scr<script>ipt>``) is caught
on the next pass.

This is a heuristic layer, not an allow-list HTML sanitizer. SVG- or CSS-based
vectors and mutation XSS are out of its reach.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional, Sequence, Tuple

import structlog
from pydantic import BaseModel, Field

from input_guard.config.settings import get_settings
from input_guard.errors import InputTooLargeError

logger = structlog.get_logger(__name__)


# =============================================================================
# RULE TABLE
# =============================================================================

CATEGORY_ELEMENT_BODY = "element_body"
CATEGORY_TAG = "dangerous_tag"
CATEGORY_EVENT_HANDLER = "event_handler"
CATEGORY_URL_SCHEME = "url_scheme"

DANGEROUS_SCHEMES: Tuple[str, ...] = ("javascript", "vbscript", "data", "file")

DANGEROUS_TAGS: Tuple[str, ...] = (
    "script",
    "iframe",
    "object",
    "embed",
    "applet",
    "meta",
    "link",
    "style",
    "form",
    "input",
    "button",
    "textarea",
    "select",
    "base",
)

# Elements whose content is dropped together with the tags
BODY_TAGS: Tuple[str, ...] = ("script", "style")

_FLAGS = re.IGNORECASE | re.DOTALL


class SanitizerRule(NamedTuple):
    """One removal pattern. Matches are replaced with the empty string."""

    category: str
    pattern: re.Pattern[str]
    description: str


def _scheme_regex(scheme: str) -> str:
    # whitespace is tolerated between every letter and before the colon: "java\tscript :"
    return r"\s*".join(re.escape(ch) for ch in scheme) + r"\s*:"


def _build_rules() -> Tuple[SanitizerRule, ...]:
    tags = "|".join(DANGEROUS_TAGS)
    bodies = "|".join(BODY_TAGS)
    rules: List[SanitizerRule] = [
        SanitizerRule(
            CATEGORY_ELEMENT_BODY,
            # Each part stops at the next opening of the same element so
            # unclosed tags never scan to the end of input.
            re.compile(
                rf"<\s*({bodies})\b(?:[^<>]|<(?!\s*\1\b))*>"
                rf"(?:(?!<\s*\1\b).)*?"
                rf"<\s*/\s*\1\b[^<>]*>",
                _FLAGS,
            ),
            "script/style element with its content",
        ),
        SanitizerRule(
            CATEGORY_TAG,
            re.compile(rf"<\s*(?:{tags})\b[^>]*(?:>|\Z)", _FLAGS),
            "opening dangerous tag",
        ),
        SanitizerRule(
            CATEGORY_TAG,
            re.compile(rf"<\s*/\s*(?:{tags})\b[^>]*(?:>|\Z)", _FLAGS),
            "closing dangerous tag",
        ),
        SanitizerRule(
            CATEGORY_EVENT_HANDLER,
            # only from the start of a whitespace run, so long runs stay linear
            re.compile(r"""(?<!\s)\s*\bon\w+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*)""", _FLAGS),
            "inline event handler attribute",
        ),
    ]
    for scheme in DANGEROUS_SCHEMES:
        rules.append(
            SanitizerRule(CATEGORY_URL_SCHEME, re.compile(_scheme_regex(scheme), _FLAGS), f"{scheme}: URL scheme")
        )
    return tuple(rules)


# Compiled once at import; shared read-only by every Sanitizer instance.
DEFAULT_RULES: Tuple[SanitizerRule, ...] = _build_rules()


# =============================================================================
# ENGINE
# =============================================================================


class SanitizationReport(BaseModel):
    """Outcome of a scrub: final text plus what was removed along the way."""

    text: str = Field(description="Sanitized, trimmed text")
    passes: int = Field(default=0, description="Passes that changed the text before it stabilised")
    removed: List[str] = Field(default_factory=list, description="Categories that matched at least once")

    @property
    def changed(self) -> bool:
        return bool(self.removed)


class Sanitizer:
    """
    Repeat-until-fixed-point engine over a rule table.

    Limits default to ``get_settings().sanitizer``. Input longer than
    ``max_input_length``, or input still changing after ``max_passes``
    changing passes, raises :class:`InputTooLargeError` instead of being
    processed.
    """

    def __init__(
        self,
        rules: Sequence[SanitizerRule] = DEFAULT_RULES,
        max_input_length: Optional[int] = None,
        max_passes: Optional[int] = None,
    ) -> None:
        limits = get_settings().sanitizer
        self.rules = tuple(rules)
        self.max_input_length = max_input_length if max_input_length is not None else limits.max_input_length
        self.max_passes = max_passes if max_passes is not None else limits.max_passes

    def check_size(self, text: str) -> None:
        if len(text) > self.max_input_length:
            raise InputTooLargeError(len(text), self.max_input_length)

    def _apply(self, text: str, removed: List[str]) -> str:
        for rule in self.rules:
            text, count = rule.pattern.subn("", text)
            if count and rule.category not in removed:
                removed.append(rule.category)
        return text.strip()

    def scrub(self, text: Optional[str]) -> SanitizationReport:
        """Sanitize ``text`` and report which categories were removed."""
        if not text:
            return SanitizationReport(text="")
        self.check_size(text)

        removed: List[str] = []
        current = text
        passes = 0
        while True:
            nxt = self._apply(current, removed)
            if nxt == current:
                break
            passes += 1
            if passes > self.max_passes:
                logger.warning("sanitizer_pass_limit_exceeded", length=len(text), max_passes=self.max_passes)
                raise InputTooLargeError(len(text), self.max_passes, reason="passes")
            current = nxt

        if removed:
            logger.debug(
                "input_sanitized",
                original_length=len(text),
                sanitized_length=len(current),
                passes=passes,
                removed=removed,
            )
        return SanitizationReport(text=current, passes=passes, removed=removed)

    def sanitize(self, text: Optional[str]) -> str:
        return self.scrub(text).text


def sanitize(text: Optional[str]) -> str:
    """
    Strip dangerous markup and URL schemes from ``text``.

    Empty or ``None`` input returns ``""``. The result is trimmed and is a
    fixed point: ``sanitize(sanitize(x)) == sanitize(x)``. Raises
    :class:`InputTooLargeError` when ``text`` exceeds the configured limits.
    """
    return Sanitizer().sanitize(text)
