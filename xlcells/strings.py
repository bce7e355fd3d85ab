"""Length-prefixed ("Pascal") strings as exchanged with the spreadsheet, and
small string and environment helpers."""

from __future__ import annotations

import logging
import os
from typing import Sequence

_log = logging.getLogger(__name__)

MAX_NARROW_LENGTH = 255
MAX_WIDE_LENGTH = 32767

_ENCODING = "latin-1"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _narrow_length(data: bytes) -> int:
    if not data:
        raise ValueError("a pascal string needs at least its length byte")
    length = data[0]
    if len(data) < length + 1:
        raise ValueError(
            f"pascal string declares {length} bytes but holds {len(data) - 1}"
        )
    return length


def _wide_length(data: Sequence[int]) -> int:
    if not data:
        raise ValueError("a wide pascal string needs at least its length unit")
    length = data[0]
    if length < 0 or len(data) < length + 1:
        raise ValueError(
            f"wide pascal string declares {length} units but holds {len(data) - 1}"
        )
    return length


def pascal_to_string(data: bytes) -> str:
    """The text of a byte string whose first byte is its length."""
    length = _narrow_length(data)
    return bytes(data[1 : length + 1]).decode(_ENCODING)


def string_to_pascal(text: str) -> bytes:
    """Encode text with a leading length byte, truncating to 255 characters."""
    if len(text) > MAX_NARROW_LENGTH:
        _log.warning("String truncated to %d bytes", MAX_NARROW_LENGTH)
        text = text[:MAX_NARROW_LENGTH]
    body = text.encode(_ENCODING, errors="replace")
    return bytes([len(body)]) + body


def wide_pascal_to_string(data: Sequence[int]) -> str:
    """The text of a sequence of code units whose first unit is its length."""
    length = _wide_length(data)
    return "".join(chr(unit) for unit in data[1 : length + 1])


def string_to_wide_pascal(text: str) -> list[int]:
    """Code units of text with a leading length unit, truncating to 32767."""
    if len(text) > MAX_WIDE_LENGTH:
        _log.warning("String truncated to %d bytes", MAX_WIDE_LENGTH)
        text = text[:MAX_WIDE_LENGTH]
    return [len(text), *(ord(ch) for ch in text)]


def pascal_copy(data: bytes) -> bytes:
    """A copy of a byte pascal string, dropping anything past its declared end."""
    length = _narrow_length(data)
    return bytes(data[: length + 1])


def wide_pascal_copy(data: Sequence[int]) -> list[int]:
    """A copy of a wide pascal string, dropping anything past its declared end."""
    length = _wide_length(data)
    return list(data[: length + 1])


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_UPPER)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)


def get_environment_variable(name: str) -> str:
    """The value of an environment variable, or an empty string if unset."""
    value = os.environ.get(name)
    if not value:
        _log.error("Could not obtain %s Environment variable", name)
        return ""
    return value


def get_current_directory() -> str:
    """The current working directory, or an empty string if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        _log.error("Could not obtain Current directory")
        return ""