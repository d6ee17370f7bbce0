"""Serialize extracted catalogs to the committed JSON artifacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from ..models import EventEntry, InterfaceEntry, MessageTypeInfo

INTERFACES_FILE = "interfaces.json"
EVENTS_FILE = "events.json"
MESSAGE_TYPES_FILE = "message-types.json"


class CatalogWriteError(RuntimeError):
    """Raised when the output directory or an artifact cannot be written."""


class CatalogWriter:
    """Writes catalog records as pretty-printed JSON arrays under one directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def write(self, filename: str, records: Iterable[Any]) -> Path:
        payload: List[Dict[str, Any]] = [record.to_dict() for record in records]
        self._ensure_directory()
        target = self.output_dir / filename
        try:
            target.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as exc:
            raise CatalogWriteError(f"Failed to write {target}: {exc}") from exc
        return target

    def write_all(
        self,
        interfaces: Sequence[InterfaceEntry],
        events: Sequence[EventEntry],
        message_types: Sequence[MessageTypeInfo],
    ) -> Dict[str, Path]:
        return {
            INTERFACES_FILE: self.write(INTERFACES_FILE, interfaces),
            EVENTS_FILE: self.write(EVENTS_FILE, events),
            MESSAGE_TYPES_FILE: self.write(MESSAGE_TYPES_FILE, message_types),
        }

    def _ensure_directory(self) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CatalogWriteError(
                f"Failed to create output directory {self.output_dir}: {exc}"
            ) from exc


__all__ = [
    "CatalogWriteError",
    "CatalogWriter",
    "EVENTS_FILE",
    "INTERFACES_FILE",
    "MESSAGE_TYPES_FILE",
]
