"""
Shared primitives for the flexible JSON codecs.

Every codec works on the raw JSON text of a single field. The helpers here
strip the optional quoting the Xtream-Codes API puts around scalars, parse
integers consistently, and define the error taxonomy all codecs raise.
"""

from __future__ import annotations

import json
import logging
import re
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)

RawJSON = Union[str, bytes, bytearray]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CodecError(ValueError):
    """Base exception for field codec failures."""


class FormatError(CodecError):
    """Raised when raw field text matches none of the accepted wire shapes."""

    def __init__(self, message: str, literal: str):
        super().__init__(f"{message}: {literal!r}")
        self.literal = literal


class UnknownTimezoneError(CodecError):
    """Raised when a timezone name does not resolve against the database."""

    def __init__(self, name: str):
        super().__init__(f"unknown timezone: {name!r}")
        self.name = name


# ---------------------------------------------------------------------------
# Shape tracking
# ---------------------------------------------------------------------------

class Shape(str, Enum):
    """Wire shape class a value was decoded from."""

    QUOTED = "quoted"
    BARE = "bare"

    def wrap(self, text: str) -> str:
        """Render already-serialized scalar text in this shape."""
        if self is Shape.QUOTED:
            return f'"{text}"'
        return text


def as_text(raw: RawJSON) -> str:
    """Return raw field JSON as text, decoding bytes as UTF-8."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError("field is not valid UTF-8", repr(bytes(raw))) from e
    return raw


def dump_wire(obj: Any) -> str:
    """Serialize an already-parsed JSON value back to raw field text."""
    try:
        return json.dumps(obj)
    except (TypeError, ValueError) as e:
        raise FormatError("value is not JSON-serializable", repr(obj)) from e


def unquote_if_present(raw: RawJSON) -> tuple[str, Shape]:
    """
    Strip a single pair of surrounding double quotes, if present.

    Surrounding whitespace is ignored. Only one pair is removed, so
    ``'""1""'`` comes back as ``'"1"'``.

    Returns:
        Tuple of the inner text and the Shape it was read from
    """
    text = as_text(raw).strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1], Shape.QUOTED
    return text, Shape.BARE


def parse_int(text: str, *, literal: str | None = None) -> int:
    """
    Parse a base-10 signed 64-bit integer.

    Args:
        text: Candidate digits, already unquoted
        literal: Original field text to quote in the error message

    Raises:
        FormatError: If text is not an integer or overflows int64
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        logger.debug("Rejected non-integer literal %r", literal or text)
        raise FormatError("invalid integer", literal if literal is not None else text)
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise FormatError("integer out of int64 range", literal if literal is not None else text)
    return value
