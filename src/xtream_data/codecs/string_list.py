"""Codec for fields that are either a single string or a list of strings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Iterator

from .base import FormatError, RawJSON, as_text
from .fields import WireCodec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlexibleStringOrList(WireCodec):
    """
    Ordered strings decoded from ``"a"`` or ``["a", "b"]``.

    ``was_scalar`` records a bare-string source. Encoding emits the bare
    string only when the flag is set and exactly one item is held; any
    other length is emitted as an array regardless of the flag.
    """

    items: tuple[str, ...]
    was_scalar: bool = False

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __getitem__(self, index: int) -> str:
        return self.items[index]

    @classmethod
    def decode(cls, raw: RawJSON) -> FlexibleStringOrList:
        text = as_text(raw)
        try:
            parsed = json.loads(text)
        except ValueError as e:
            logger.debug("Rejected invalid JSON %r", text)
            raise FormatError("invalid JSON for string or list", text) from e

        if text.lstrip()[:1] == '"':
            return cls((parsed,), was_scalar=True)

        if not isinstance(parsed, list):
            logger.debug("Rejected non-array value %r", text)
            raise FormatError("expected string or array of strings", text)
        for item in parsed:
            if not isinstance(item, str):
                logger.debug("Rejected array with non-string element %r", text)
                raise FormatError("array contains a non-string element", text)
        return cls(tuple(parsed), was_scalar=False)

    def to_wire(self) -> str | list[str]:
        if self.was_scalar and len(self.items) == 1:
            return self.items[0]
        return list(self.items)

    def encode(self) -> str:
        return json.dumps(self.to_wire())
