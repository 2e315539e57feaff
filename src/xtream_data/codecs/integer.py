"""Integer codec tolerant of quoting and space padding."""

from __future__ import annotations

from typing import Any

from .base import RawJSON, as_text, dump_wire, parse_int


class FlexibleInteger:
    """
    int64 accepted as ``42``, ``"42"`` or ``"  42 "``.

    Unlike the boolean and timestamp codecs this one does not remember the
    source quoting: encode always emits the bare numeral.
    """

    @staticmethod
    def decode(raw: RawJSON) -> int:
        text = as_text(raw)
        return parse_int(text.strip('" '), literal=text)

    @staticmethod
    def from_wire(obj: Any) -> int:
        return FlexibleInteger.decode(dump_wire(obj))

    @staticmethod
    def encode(value: int) -> str:
        return str(int(value))
