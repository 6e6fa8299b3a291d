"""
Binary Converter Rules
======================
Pure functions that validate edits to the binary input and convert it to
decimal. No Qt here, so everything can be called from tests directly.

Functions:
    is_valid_text: Digit-validity predicate.
    can_accept: Length boundary check shared by both edit paths.
    validate_and_append: Replace-on-change edit coming from the text field.
    append_digit: Single digit from the insert buttons.
    convert: Binary text -> decimal text.
    clear: Empty input.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from binaryconverter.model.errors import ValidationError, ErrorKind
from binaryconverter.model.state import CompatibilityMode

logger = logging.getLogger(__name__)

BINARY_DIGITS = ("0", "1")

_FULL_MATCH = re.compile(r"^[01]+$")
_PARTIAL_MATCH = re.compile(r"(0|1)")


def is_valid_text(text: str, rules: CompatibilityMode = CompatibilityMode.STRICT) -> bool:
    if rules == CompatibilityMode.LEGACY:
        return _PARTIAL_MATCH.search(text) is not None
    return _FULL_MATCH.match(text) is not None


def can_accept(
    current: str,
    limit_enabled: bool,
    limit: int,
    rules: CompatibilityMode = CompatibilityMode.STRICT,
    incoming: Optional[str] = None,
) -> bool:
    """
    Length boundary check.

    `incoming` is the full replacement text, or None for a one digit append.
    LEGACY only looks at the current length (`len(current) <= limit`), which
    lets a ninth character in. STRICT looks at the resulting length and
    always allows shortening.
    """
    if not limit_enabled:
        return True

    if rules == CompatibilityMode.LEGACY:
        return len(current) <= limit

    new_length = len(current) + 1 if incoming is None else len(incoming)
    return new_length <= limit or new_length < len(current)


def validate_and_append(
    current: str,
    incoming_text: str,
    limit_enabled: bool,
    limit: int,
    rules: CompatibilityMode = CompatibilityMode.STRICT,
) -> str:
    """
    Accept `incoming_text` as the new full input value.

    Returns `current` untouched when the length boundary rejects the edit.
    Raises ValidationError when the text holds something other than 0/1.
    Empty text always clears.
    """
    if not can_accept(current, limit_enabled, limit, rules, incoming=incoming_text):
        logger.debug(f"Edit ignored, limit of {limit} digits reached.")
        return current

    if incoming_text and not is_valid_text(incoming_text, rules):
        logger.warning(f"Rejected input {incoming_text!r}.")
        raise ValidationError(ErrorKind.INVALID_DIGIT)

    return incoming_text


def append_digit(
    current: str,
    digit: str,
    limit_enabled: bool,
    limit: int,
    rules: CompatibilityMode = CompatibilityMode.STRICT,
) -> str:
    """Append one digit, or silently do nothing past the limit."""
    if digit not in BINARY_DIGITS:
        raise ValidationError(ErrorKind.INVALID_DIGIT)

    if not can_accept(current, limit_enabled, limit, rules):
        logger.debug(f"Digit '{digit}' ignored, limit of {limit} digits reached.")
        return current

    return current + digit


def convert(current: str) -> str:
    """
    Interpret `current` as a big-endian binary numeral.

    The last character has weight 2**0. Empty input gives "0".
    """
    result = 0
    for power, char in enumerate(reversed(current)):
        if char not in BINARY_DIGITS:
            raise ValidationError(ErrorKind.INVALID_DIGIT)
        result += int(char) * 2 ** power

    return str(result)


def clear() -> str:
    return ""
