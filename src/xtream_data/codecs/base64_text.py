"""Codec for text fields the API ships Base64-encoded (EPG titles, descriptions)."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

from .base import FormatError, RawJSON, as_text, dump_wire

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


class Base64Text:
    """
    Plain text at the boundary, Base64 on the wire.

    Only canonical Base64 is accepted (zero pad bits), so re-encoding a
    decoded value always reproduces the wire string.
    """

    @staticmethod
    def decode(raw: RawJSON) -> str:
        text = as_text(raw)
        try:
            payload = json.loads(text)
        except ValueError as e:
            logger.debug("Rejected non-JSON Base64 field %r", text)
            raise FormatError("invalid JSON string", text) from e
        if not isinstance(payload, str):
            logger.debug("Rejected non-string Base64 field %r", text)
            raise FormatError("expected Base64 string", text)

        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.debug("Rejected invalid Base64 %r", payload)
            raise FormatError("invalid Base64", payload) from e
        if base64.b64encode(data).decode("ascii") != payload:
            logger.debug("Rejected non-canonical Base64 %r", payload)
            raise FormatError("non-canonical Base64", payload)
        try:
            return data.decode(TEXT_ENCODING)
        except UnicodeDecodeError as e:
            logger.debug("Rejected Base64 payload that is not %s: %r", TEXT_ENCODING, payload)
            raise FormatError(f"Base64 payload is not valid {TEXT_ENCODING}", payload) from e

    @staticmethod
    def from_wire(obj: Any) -> str:
        return Base64Text.decode(dump_wire(obj))

    @staticmethod
    def to_wire(value: str) -> str:
        """Base64 form of value, as the parsed JSON string."""
        return base64.b64encode(value.encode(TEXT_ENCODING)).decode("ascii")

    @staticmethod
    def encode(value: str) -> str:
        return json.dumps(Base64Text.to_wire(value))
