"""Locate the block comment attached directly above a declaration."""

from __future__ import annotations

from typing import Optional, Sequence

_OPEN_MARKER = "/**"
_CLOSE_MARKER = "*/"


def find_doc_comment(lines: Sequence[str], index: int) -> Optional[str]:
    """Return the ``/** ... */`` block ending on ``lines[index - 1]``, if any.

    Attachment is strict: the comment must close on the line immediately above
    the declaration. A blank or code line in between means no comment. When the
    closing marker is present but no opening marker is found before the start of
    the file, the block is treated as absent.
    """
    probe = index - 1
    if probe < 0 or probe >= len(lines):
        return None
    if not lines[probe].strip().endswith(_CLOSE_MARKER):
        return None

    buffer = []
    while probe >= 0:
        line = lines[probe]
        buffer.append(line)
        if line.strip().startswith(_OPEN_MARKER):
            buffer.reverse()
            return "\n".join(buffer).strip()
        probe -= 1
    return None


__all__ = ["find_doc_comment"]
