"""
Timezone codec resolving IANA names.

The timezone database is injected as a resolver so tests can swap in a
fake; by default names resolve through ``zoneinfo``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .base import FormatError, RawJSON, UnknownTimezoneError, as_text
from .fields import WireCodec

logger = logging.getLogger(__name__)

TimezoneResolver = Callable[[str], tzinfo]


class ZoneInfoResolver:
    """Resolve names against the system (or ``tzdata``) IANA database."""

    def __call__(self, name: str) -> tzinfo:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            # OSError covers names that hit a tzdata directory, e.g. "America"
            raise UnknownTimezoneError(name) from e


default_resolver = ZoneInfoResolver()


@dataclass(frozen=True)
class FlexibleTimezone(WireCodec):
    """Timezone decoded from a quoted IANA identifier."""

    zone: tzinfo = field(compare=False)
    name: str

    @classmethod
    def decode(
        cls,
        raw: RawJSON,
        resolver: Optional[TimezoneResolver] = None,
    ) -> FlexibleTimezone:
        text = as_text(raw)
        # The panel sometimes double-escapes; drop one layer.
        unescaped = text.replace("\\", "", 1)
        try:
            name = json.loads(unescaped)
        except ValueError as e:
            raise FormatError("invalid timezone string", text) from e
        if not isinstance(name, str):
            raise FormatError("timezone must be a string", text)

        resolve = resolver or default_resolver
        try:
            zone = resolve(name)
        except UnknownTimezoneError:
            logger.debug("Unknown timezone %r", name)
            raise
        except LookupError as e:
            raise UnknownTimezoneError(name) from e
        if zone is None:
            raise UnknownTimezoneError(name)
        return cls(zone, getattr(zone, "key", None) or name)

    def to_wire(self) -> str:
        return self.name

    def encode(self) -> str:
        return json.dumps(self.name)
