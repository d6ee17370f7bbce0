"""Catalog extraction for the WFC SDK sources."""

__version__ = "0.1.0"
