"""Unix epoch timestamp codec accepting bare or quoted integers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .base import FormatError, RawJSON, Shape, as_text, parse_int, unquote_if_present
from .fields import WireCodec


@dataclass(frozen=True)
class FlexibleTimestamp(WireCodec):
    """Point in time decoded from epoch seconds, keeping the source quoting."""

    value: datetime
    shape: Shape = Shape.BARE

    @classmethod
    def from_epoch(cls, seconds: int, shape: Shape = Shape.BARE) -> FlexibleTimestamp:
        try:
            return cls(datetime.fromtimestamp(seconds, tz=timezone.utc), shape)
        except (OverflowError, OSError, ValueError) as e:
            raise FormatError("timestamp out of range", str(seconds)) from e

    @property
    def epoch(self) -> int:
        """Seconds since the Unix epoch."""
        return int(self.value.timestamp())

    @classmethod
    def decode(cls, raw: RawJSON) -> FlexibleTimestamp:
        text, shape = unquote_if_present(raw)
        return cls.from_epoch(parse_int(text, literal=text), shape)

    def to_wire(self) -> int | str:
        if self.shape is Shape.QUOTED:
            return str(self.epoch)
        return self.epoch

    def encode(self) -> str:
        return self.shape.wrap(str(self.epoch))


class OptionalTimestamp:
    """Nullable wrapper for timestamps such as an account expiry date."""

    @staticmethod
    def decode(raw: RawJSON) -> Optional[FlexibleTimestamp]:
        if as_text(raw).strip() == "null":
            return None
        return FlexibleTimestamp.decode(raw)

    @staticmethod
    def encode(value: Optional[FlexibleTimestamp]) -> str:
        if value is None:
            return "null"
        return value.encode()
