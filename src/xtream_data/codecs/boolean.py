"""Boolean codec accepting 0/1 and true/false, quoted or bare."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .base import FormatError, RawJSON, Shape, unquote_if_present
from .fields import WireCodec

logger = logging.getLogger(__name__)

TRUE_LITERALS = frozenset({"1", "true"})
FALSE_LITERALS = frozenset({"0", "false"})


@dataclass(frozen=True)
class FlexibleBoolean(WireCodec):
    """
    Boolean that remembers whether it arrived quoted.

    Decodes ``0``, ``1``, ``"0"``, ``"1"``, ``true``, ``false``, ``"true"``
    and ``"false"``. Encoding always emits the numeral form (``1``/``0``),
    quoted again if the source was quoted, so ``true`` comes back as ``1``.
    """

    value: bool
    shape: Shape = Shape.BARE

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def decode(cls, raw: RawJSON) -> FlexibleBoolean:
        text, shape = unquote_if_present(raw)
        if text in TRUE_LITERALS:
            return cls(True, shape)
        if text in FALSE_LITERALS:
            return cls(False, shape)
        logger.debug("Rejected boolean literal %r", text)
        raise FormatError("invalid boolean", text)

    def to_wire(self) -> int | str:
        bit = 1 if self.value else 0
        if self.shape is Shape.QUOTED:
            return str(bit)
        return bit

    def encode(self) -> str:
        return self.shape.wrap("1" if self.value else "0")
