from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import SearchResults


class BaseProvider(ABC):
    """Abstract base class for article search backends."""

    page_size: int

    @abstractmethod
    def fetch_everything(self, query: str, page: str) -> SearchResults:
        """Return one page of articles matching ``query``."""
