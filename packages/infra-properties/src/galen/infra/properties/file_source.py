"""Flat ``.properties`` file parsing.

Reads the key/value text format used by Galen config files:

- ``#`` and ``!`` start comment lines
- keys end at the first unescaped ``=``, ``:`` or whitespace
- a line ending in an odd number of backslashes continues on the next line
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are decoded,
  any other escaped character stands for itself

Later entries overwrite earlier ones with the same key.
"""

from __future__ import annotations

import logging
import re
import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesSyntaxError(ValueError):
    """Raised when a properties file contains a malformed escape sequence."""

    def __init__(self, reason: str, line_number: int) -> None:
        self.reason = reason
        self.line_number = line_number
        super().__init__(f"{reason} (line {line_number})")


def _trailing_backslashes(text: str) -> int:
    return len(text) - len(text.rstrip("\\"))


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (starting line number, logical line) pairs."""
    pending: str | None = None
    start = 0
    for number, natural in enumerate(_LINE_BREAK.split(text), start=1):
        stripped = natural.lstrip(_WHITESPACE)
        if pending is None:
            if not stripped or stripped[0] in "#!":
                continue
            start = number
            current = stripped
        else:
            current = pending + stripped

        if stripped and _trailing_backslashes(stripped) % 2 == 1:
            pending = current[:-1]
        else:
            pending = None
            yield start, current

    if pending is not None:
        yield start, pending


def _unescape(text: str, line_number: int) -> str:
    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        i += 1
        if char != "\\":
            chars.append(char)
            continue
        if i >= len(text):
            break
        char = text[i]
        i += 1
        if char == "u":
            digits = text[i : i + 4]
            if len(digits) < 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesSyntaxError("Malformed \\uxxxx encoding", line_number)
            chars.append(chr(int(digits, 16)))
            i += 4
        else:
            chars.append(_ESCAPES.get(char, char))
    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1
    i = min(i, len(line))

    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:i], rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a flat dict.

    Args:
        text: Full contents of a properties file.

    Returns:
        Mapping of decoded keys to decoded values.

    Raises:
        PropertiesSyntaxError: If an escape sequence is malformed.
    """
    properties: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[_unescape(raw_key, line_number)] = _unescape(raw_value, line_number)
    return properties


def load_properties_file(path: Path, encoding: str = "utf-8") -> dict[str, str]:
    """Read and parse a properties file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in the given encoding.
        PropertiesSyntaxError: If an escape sequence is malformed.
    """
    properties = parse_properties(path.read_text(encoding=encoding))
    logger.debug(
        "properties_file_parsed",
        extra={"path": str(path), "property_count": len(properties)},
    )
    return properties


class FilePropertiesLoader:
    """Loads config files from disk for the configuration store.

    Args:
        encoding: Text encoding of the config file.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: Path) -> dict[str, str]:
        return load_properties_file(path, self._encoding)
