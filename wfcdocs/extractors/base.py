"""Base classes for source extractors."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Extractor(ABC, Generic[T]):
    """Contract for extractors that turn one file's raw text into catalog entries."""

    @abstractmethod
    def extract(self, source: str) -> List[T]:
        """Return entries recovered from ``source`` in a deterministic order."""
