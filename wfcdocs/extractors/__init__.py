"""Heuristic extractors over raw SDK source text."""

from __future__ import annotations

from .base import Extractor
from .classes import ClassMetaExtractor, scan_class_directory
from .constants import NumericConstantExtractor, extract_enums, extract_flags, parse_numeral
from .events import EventExtractor
from .interfaces import InterfaceExtractor, dedupe_by_name
from .jsdoc import find_doc_comment

__all__ = [
    "ClassMetaExtractor",
    "EventExtractor",
    "Extractor",
    "InterfaceExtractor",
    "NumericConstantExtractor",
    "dedupe_by_name",
    "extract_enums",
    "extract_flags",
    "find_doc_comment",
    "parse_numeral",
    "scan_class_directory",
]
