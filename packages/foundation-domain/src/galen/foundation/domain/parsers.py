"""Parsers translating raw property strings into typed values.

All functions are pure. Strict parsers raise ``ValueError`` for anything
outside their grammar; they never fall back to a default. The lenient
boolean parser is the one exception and never raises.
"""

from __future__ import annotations

import re

from galen.foundation.domain.error_rate import ErrorRate, ErrorRateType

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_ERROR_RATE_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*(px|%)")


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Accepts an optional sign followed by ASCII digits. Surrounding
    whitespace, underscores, and non-ASCII digits are rejected.

    Args:
        text: Raw property value.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If text is not an integer or does not fit in 32 bits.
    """
    if not _INT_PATTERN.fullmatch(text):
        msg = f"Not an integer: {text!r}"
        raise ValueError(msg)
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        msg = f"Integer out of 32-bit range: {text}"
        raise ValueError(msg)
    return value


def is_numeric(text: str) -> bool:
    """Return True when text is non-empty and contains only ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def parse_boolean(text: str) -> bool:
    """Lenient boolean parse: only a case-insensitive ``"true"`` is True."""
    return text.lower() == "true"


def parse_comma_separated_list(text: str) -> list[str]:
    """Split on commas, trim each entry, and drop empty entries.

    Example:
        >>> parse_comma_separated_list(" a, ,b ,,c")
        ['a', 'b', 'c']
    """
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_error_rate(text: str) -> ErrorRate:
    """Parse an error rate such as ``"5px"``, ``"2.5%"`` or ``"10 px"``.

    Args:
        text: Raw property value. Leading and trailing whitespace is ignored.

    Returns:
        The parsed ErrorRate.

    Raises:
        ValueError: If text does not match ``<number> [px|%]`` or the
            resulting value is out of range.
    """
    match = _ERROR_RATE_PATTERN.fullmatch(text.strip())
    if match is None:
        msg = f"Incorrect error rate: {text!r}"
        raise ValueError(msg)
    number, unit = match.groups()
    return ErrorRate(value=float(number), type=ErrorRateType(unit))
