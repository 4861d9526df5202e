"""
CLI entry point for input-guard.

Subcommands: sanitize, check. Text is taken from the positional argument or,
when omitted, from stdin. ``check`` prints the ValidationResult as JSON.
Exit codes: 0 accepted, 1 rejected or input too large, 2 usage error.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import structlog

from input_guard.errors import InputTooLargeError
from input_guard.guardrails import FIELD_VALIDATORS, sanitize, validate_field
from input_guard.utils.logging import configure_logging

logger = structlog.get_logger(__name__)

_LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT_CHOICES = ("console", "json")


def _read_text(text: Optional[str]) -> str:
    if text is not None:
        return text
    data = sys.stdin.read()
    # drop the line ending an interactive shell or echo adds
    return data[:-1] if data.endswith("\n") else data


def _cmd_sanitize(text: str) -> int:
    """Print the sanitized text."""
    try:
        print(sanitize(text))
    except InputTooLargeError as e:
        logger.warning("sanitize_refused", length=e.length, limit=e.limit, reason=e.reason)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_check(kind: str, text: str) -> int:
    """Validate text as the given field kind and print the verdict as JSON."""
    result = validate_field(kind, text)
    print(json.dumps(result.model_dump(exclude_none=True), indent=2))
    return 0 if result.valid else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="input-guard",
        description="Sanitize untrusted text and validate chat messages, usernames, passwords and emails.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVEL_CHOICES,
        default=None,
        help="Override LOG_LOG_LEVEL for this run.",
    )
    parser.add_argument(
        "--log-format",
        choices=_LOG_FORMAT_CHOICES,
        default=None,
        help="Override LOG_LOG_FORMAT for this run.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    san_p = subparsers.add_parser("sanitize", help="Print TEXT with dangerous markup removed.")
    san_p.add_argument("text", nargs="?", default=None, help="Text to sanitize (default: read stdin).")

    chk_p = subparsers.add_parser("check", help="Validate TEXT as a chat message or identity field.")
    chk_p.add_argument("kind", choices=tuple(FIELD_VALIDATORS), help="Kind of field to validate.")
    chk_p.add_argument("text", nargs="?", default=None, help="Value to validate (default: read stdin).")

    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    configure_logging(**overrides)

    text = _read_text(args.text)
    if args.command == "sanitize":
        return _cmd_sanitize(text)
    return _cmd_check(args.kind, text)


if __name__ == "__main__":
    sys.exit(main())
