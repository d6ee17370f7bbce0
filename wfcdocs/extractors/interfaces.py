"""Extract callable method signatures from the SDK client class."""

from __future__ import annotations

import re
from typing import Dict, List

from .base import Extractor
from .jsdoc import find_doc_comment
from ..models import InterfaceEntry
from ..sources import split_lines

# Single-line declarations only: ``name(params) {``.
_METHOD_PATTERN = re.compile(r"^(\s*)([A-Za-z_$][A-Za-z0-9_$]*)\s*\(([^)]*)\)\s*\{")

_RESERVED_NAMES = frozenset({"constructor"})


class InterfaceExtractor(Extractor[InterfaceEntry]):
    """Finds method-like declarations and their attached jsdoc blocks."""

    def extract(self, source: str) -> List[InterfaceEntry]:
        if not source:
            return []

        lines = split_lines(source)
        entries: List[InterfaceEntry] = []
        for index, line in enumerate(lines):
            match = _METHOD_PATTERN.match(line)
            if not match:
                continue
            name = match.group(2)
            if name in _RESERVED_NAMES:
                continue
            entries.append(
                InterfaceEntry(
                    name=name,
                    params=_split_params(match.group(3)),
                    jsdoc=find_doc_comment(lines, index),
                )
            )
        return dedupe_by_name(entries)


def _split_params(raw: str) -> List[str]:
    if not raw.strip():
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def dedupe_by_name(entries: List[InterfaceEntry]) -> List[InterfaceEntry]:
    """Keep the first entry for each name, preserving encounter order."""
    seen: Dict[str, InterfaceEntry] = {}
    for entry in entries:
        if entry.name not in seen:
            seen[entry.name] = entry
    return list(seen.values())


__all__ = ["InterfaceExtractor", "dedupe_by_name"]
