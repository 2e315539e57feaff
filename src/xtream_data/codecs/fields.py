"""
Pydantic hooks for the flexible codecs.

Models declare which codec governs which field; pydantic then calls the
codec on validation and serialization. Codec values round-trip through
``model_dump()`` / ``model_dump_json()`` in their original wire shape.

Usage:
    class UserInfo(BaseModel):
        auth: FlexibleBoolean
        exp_date: Optional[FlexibleTimestamp] = None
        max_connections: QuotedInt
        tv_archive_duration: FlexibleInt
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Any

from pydantic import BeforeValidator, GetCoreSchemaHandler, PlainSerializer
from pydantic_core import core_schema

from .base import FormatError, RawJSON, dump_wire
from .base64_text import Base64Text
from .integer import FlexibleInteger


class WireCodec(ABC):
    """
    Base wiring a codec value type into pydantic.

    Subclasses must implement ``decode(raw)`` and ``to_wire()``.
    """

    @classmethod
    @abstractmethod
    def decode(cls, raw: RawJSON) -> Any:
        """Decode raw JSON text into a codec value."""

    @abstractmethod
    def to_wire(self) -> Any:
        """Return the parsed-JSON wire form of this value."""

    @classmethod
    def from_wire(cls, obj: Any) -> Any:
        """Decode from an already-parsed JSON value."""
        return cls.decode(dump_wire(obj))

    @classmethod
    def _validate(cls, obj: Any) -> Any:
        if isinstance(obj, cls):
            return obj
        return cls.from_wire(obj)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_wire()
            ),
        )


def _flexible_int(obj: Any) -> int:
    if isinstance(obj, int) and not isinstance(obj, bool):
        return obj
    return FlexibleInteger.from_wire(obj)


def _quoted_int(obj: Any) -> int:
    if isinstance(obj, int) and not isinstance(obj, bool):
        return obj
    if not isinstance(obj, str):
        raise FormatError("expected quoted integer", repr(obj))
    return FlexibleInteger.from_wire(obj)


def _base64_str(obj: Any) -> str:
    return Base64Text.from_wire(obj)


# Integer accepted bare, quoted, or padded with spaces; always emitted bare.
FlexibleInt = Annotated[int, BeforeValidator(_flexible_int)]

# Integer the API always quotes; emitted quoted.
QuotedInt = Annotated[
    int,
    BeforeValidator(_quoted_int),
    PlainSerializer(lambda value: str(value), return_type=str),
]

# Text the API ships Base64-encoded.
Base64Str = Annotated[
    str,
    BeforeValidator(_base64_str),
    PlainSerializer(Base64Text.to_wire, return_type=str),
]
