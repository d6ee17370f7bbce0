"""Read-only access to committed catalogs for lookups and presentation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog_writer import EVENTS_FILE, INTERFACES_FILE, MESSAGE_TYPES_FILE
from ..logging import get_logger
from ..registry import sort_message_types

Record = Dict[str, Any]


class CatalogLoadError(RuntimeError):
    """Raised when a catalog file is missing or is not a JSON array of objects."""


class CatalogStore:
    """Loads the three catalogs once and answers read-only queries over them.

    Nothing here re-runs extraction; callers see exactly what was committed.
    """

    def __init__(self, docs_dir: Path) -> None:
        self.docs_dir = docs_dir
        self._interfaces: List[Record] = []
        self._events: List[Record] = []
        self._message_types: List[Record] = []
        self.logger = get_logger("stores.catalog")

    def load(self) -> "CatalogStore":
        self._interfaces = self._load(INTERFACES_FILE)
        self._events = self._load(EVENTS_FILE)
        self._message_types = self._load(MESSAGE_TYPES_FILE)
        self.logger.info(
            "Loaded %d interfaces, %d events, %d message types",
            len(self._interfaces),
            len(self._events),
            len(self._message_types),
        )
        return self

    def interfaces(self) -> List[Record]:
        return list(self._interfaces)

    def events(self) -> List[Record]:
        return list(self._events)

    def message_types(self) -> List[Record]:
        return list(self._message_types)

    def find_interface(self, name: str) -> Optional[Record]:
        return next((item for item in self._interfaces if item.get("name") == name), None)

    def sorted_message_types(self) -> List[Record]:
        return sort_message_types(self._message_types)

    # ------------------------------------------------------------------
    # Internal helpers

    def _load(self, filename: str) -> List[Record]:
        path = self.docs_dir / filename
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogLoadError(f"Catalog file not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(f"Failed to load catalog {path}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise CatalogLoadError(f"Catalog {path} must contain a JSON array of objects")
        return data


__all__ = ["CatalogLoadError", "CatalogStore"]
