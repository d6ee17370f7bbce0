"""Extract string-valued static event constants."""

from __future__ import annotations

import re
from typing import List

from .base import Extractor
from ..models import EventEntry

# Scanned over the whole text, not line by line.
_EVENT_PATTERN = re.compile(
    r"""static\s+([A-Za-z_$][A-Za-z0-9_$]*)\s*=\s*['"]([^'"]+)['"];?"""
)


class EventExtractor(Extractor[EventEntry]):
    """Collects ``static NAME = 'value'`` declarations in source order.

    Duplicate names are kept; every definition shows up in the catalog.
    """

    def extract(self, source: str) -> List[EventEntry]:
        if not source:
            return []
        return [
            EventEntry(name=match.group(1), value=match.group(2))
            for match in _EVENT_PATTERN.finditer(source)
        ]


__all__ = ["EventExtractor"]
