"""Extract numeric static constants from the type enum and persist flag files."""

from __future__ import annotations

import math
import re
from typing import Callable, Generic, List, Optional, TypeVar

from .base import Extractor
from .jsdoc import find_doc_comment
from ..models import EnumEntry, FlagEntry, Number
from ..sources import split_lines

T = TypeVar("T")

_CONSTANT_PATTERN = re.compile(r"static\s+([A-Za-z0-9_]+)\s*=\s*([^;]+)")

_DECIMAL_INT = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_INT = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def parse_numeral(text: str) -> Optional[Number]:
    """Parse a bare numeric literal, returning ``None`` for anything else.

    Accepts signed decimal integers and fractions with optional exponent, and
    unsigned ``0x``/``0o``/``0b`` integers. Integral values come back as ``int``.
    """
    text = text.strip()
    if not text:
        return None
    if _PREFIXED_INT.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_INT.fullmatch(text):
        return int(text)
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


class NumericConstantExtractor(Extractor[T], Generic[T]):
    """Line scanner for ``static NAME = <number>`` declarations.

    Lines whose initializer is not a clean numeral are skipped silently, since
    the scanned files mix numeric and non-numeric static fields. Duplicates are
    all returned; map folding downstream decides which one wins.
    """

    def __init__(self, factory: Callable[[str, Number, Optional[str]], T]) -> None:
        self._factory = factory

    def extract(self, source: str) -> List[T]:
        if not source:
            return []

        lines = split_lines(source)
        entries: List[T] = []
        for index, line in enumerate(lines):
            match = _CONSTANT_PATTERN.search(line)
            if not match:
                continue
            value = parse_numeral(match.group(2))
            if value is None:
                continue
            entries.append(self._factory(match.group(1), value, find_doc_comment(lines, index)))
        return entries


def extract_enums(source: str) -> List[EnumEntry]:
    return NumericConstantExtractor(EnumEntry).extract(source)


def extract_flags(source: str) -> List[FlagEntry]:
    return NumericConstantExtractor(FlagEntry).extract(source)


__all__ = [
    "NumericConstantExtractor",
    "extract_enums",
    "extract_flags",
    "parse_numeral",
]
