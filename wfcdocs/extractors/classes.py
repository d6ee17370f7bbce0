"""Extract default-exported class declarations from message definition files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Sequence

from .jsdoc import find_doc_comment
from ..logging import get_logger
from ..models import ClassMetaEntry
from ..sources import iter_source_files, read_file_safe, split_lines

_EXTENDS_PATTERN = re.compile(
    r"export\s+default\s+class\s+([A-Za-z0-9_]+)\s+extends\s+([A-Za-z0-9_]+)"
)
_CLASS_PATTERN = re.compile(r"export\s+default\s+class\s+([A-Za-z0-9_]+)")

logger = get_logger("extractors.classes")


class ClassMetaExtractor:
    """Finds ``export default class Name [extends Base]`` lines in one file."""

    def extract(self, source: str, file_path: str) -> List[ClassMetaEntry]:
        if not source:
            return []

        lines = split_lines(source)
        entries: List[ClassMetaEntry] = []
        for index, line in enumerate(lines):
            match = _EXTENDS_PATTERN.search(line)
            if match:
                entries.append(
                    ClassMetaEntry(
                        file_path=file_path,
                        class_name=match.group(1),
                        base_class=match.group(2),
                        jsdoc=find_doc_comment(lines, index),
                    )
                )
                continue
            match = _CLASS_PATTERN.search(line)
            if match:
                entries.append(
                    ClassMetaEntry(
                        file_path=file_path,
                        class_name=match.group(1),
                        jsdoc=find_doc_comment(lines, index),
                    )
                )
        return entries


def scan_class_directory(
    directory: Path, suffixes: Sequence[str]
) -> Dict[str, ClassMetaEntry]:
    """Fold every matching file in ``directory`` into a class-name keyed map.

    Files are visited in name order; a class defined in several files keeps the
    entry from the last one visited.
    """
    extractor = ClassMetaExtractor()
    classes: Dict[str, ClassMetaEntry] = {}
    for path in iter_source_files(directory, suffixes):
        content = read_file_safe(path)
        if not content:
            continue
        found = extractor.extract(content, str(path))
        logger.debug("Found %d class declaration(s) in %s", len(found), path.name)
        for entry in found:
            classes[entry.class_name] = entry
    return classes


__all__ = ["ClassMetaExtractor", "scan_class_directory"]
