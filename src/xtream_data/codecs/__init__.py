"""
Adaptive JSON codecs for the Xtream-Codes panel API.

The API encodes the same logical value in several ways across endpoints
(``"1"`` vs ``1`` vs ``true``, quoted vs bare epochs, a string vs a list
of one string). Each codec here accepts every known shape for one field
and, where it matters, re-emits the shape class it decoded from.

Usage:
    from xtream_data.codecs import FlexibleBoolean, FlexibleTimestamp

    auth = FlexibleBoolean.decode('"1"')
    assert auth.value is True
    assert auth.encode() == '"1"'
"""

from .base import (
    CodecError,
    FormatError,
    Shape,
    UnknownTimezoneError,
    parse_int,
    unquote_if_present,
)
from .base64_text import Base64Text
from .boolean import FlexibleBoolean
from .fields import Base64Str, FlexibleInt, QuotedInt, WireCodec
from .integer import FlexibleInteger
from .string_list import FlexibleStringOrList
from .timestamp import FlexibleTimestamp, OptionalTimestamp
from .timezone import FlexibleTimezone, TimezoneResolver, ZoneInfoResolver

__all__ = [
    # Errors
    "CodecError",
    "FormatError",
    "UnknownTimezoneError",
    # Primitives
    "Shape",
    "parse_int",
    "unquote_if_present",
    # Codecs
    "Base64Text",
    "FlexibleBoolean",
    "FlexibleInteger",
    "FlexibleStringOrList",
    "FlexibleTimestamp",
    "FlexibleTimezone",
    "OptionalTimestamp",
    "TimezoneResolver",
    "ZoneInfoResolver",
    # Pydantic field types
    "Base64Str",
    "FlexibleInt",
    "QuotedInt",
    "WireCodec",
]
