"""Persistence for generated catalogs."""

from .catalog_store import CatalogLoadError, CatalogStore
from .catalog_writer import (
    EVENTS_FILE,
    INTERFACES_FILE,
    MESSAGE_TYPES_FILE,
    CatalogWriteError,
    CatalogWriter,
)

__all__ = [
    "CatalogLoadError",
    "CatalogStore",
    "CatalogWriteError",
    "CatalogWriter",
    "EVENTS_FILE",
    "INTERFACES_FILE",
    "MESSAGE_TYPES_FILE",
]
