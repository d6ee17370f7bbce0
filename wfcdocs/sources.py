"""Filesystem helpers for locating and reading SDK sources."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Sequence

from .logging import get_logger

_LINE_BREAK = re.compile(r"\r?\n")

logger = get_logger("sources")


class WorkspaceNotFoundError(RuntimeError):
    """Raised when no ancestor directory carries the workspace marker."""


def find_workspace_root(start: Path, marker: str) -> Path:
    """Walk up from ``start`` until a directory containing ``marker`` is found."""
    current = start.expanduser().resolve()
    if current.is_file():
        current = current.parent
    while True:
        if (current / marker).exists():
            return current
        parent = current.parent
        if parent == current:
            raise WorkspaceNotFoundError(
                f"Failed to locate workspace root from {start} (no {marker} found)"
            )
        current = parent


def read_file_safe(path: Path) -> str:
    """Return the file's text, or an empty string when it cannot be read.

    A leading byte-order mark is dropped so it cannot hide a declaration on the
    first line.
    """
    if not path.is_file():
        logger.debug("Source file missing: %s", path)
        return ""
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read file %s: %s", path, exc)
        return ""


def split_lines(source: str) -> List[str]:
    """Split on LF or CRLF, keeping a trailing empty line like ``str.split`` does."""
    return _LINE_BREAK.split(source)


def iter_source_files(directory: Path, suffixes: Sequence[str]) -> Iterator[Path]:
    """Yield files in ``directory`` whose names end in one of ``suffixes``, sorted by name."""
    if not directory.is_dir():
        return
    wanted = tuple(suffixes)
    for path in sorted(directory.iterdir(), key=lambda item: item.name):
        if not path.name.endswith(wanted):
            continue
        if not path.is_file():
            continue
        yield path


__all__ = [
    "WorkspaceNotFoundError",
    "find_workspace_root",
    "iter_source_files",
    "read_file_safe",
    "split_lines",
]
