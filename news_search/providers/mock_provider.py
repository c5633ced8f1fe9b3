from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from ..models import Article, SearchResults
from .base import BaseProvider


class MockProvider(BaseProvider):
    """Returns hard-coded articles for offline development."""

    def __init__(self, page_size: int = 20, total_results: Optional[int] = None) -> None:
        self.page_size = page_size
        self._total_results = total_results
        self.calls: List[Tuple[str, str]] = []

    def fetch_everything(self, query: str, page: str) -> SearchResults:
        self.calls.append((query, page))
        now = datetime.now(timezone.utc)
        sample = [
            Article(
                source_id="example-news",
                source_name="Example News",
                author="Jane Reporter",
                title=f"{query.title()} expands sustainability efforts",
                description="Company targets lower emissions and greener supply chains.",
                url="https://example.com/sustainability",
                image_url="https://example.com/sustainability.jpg",
                published_at=now - timedelta(hours=2),
                content=f"{query} announced new sustainability targets.",
            ),
            Article(
                source_id=None,
                source_name="Market Watchers",
                author="",
                title=f"Analysts debate {query} quarterly earnings",
                description="Mixed analyst sentiment following the latest results.",
                url="https://example.com/earnings",
                image_url="",
                published_at=now - timedelta(days=1),
                content="",
            ),
        ]
        total = self._total_results if self._total_results is not None else len(sample)
        return SearchResults(status="ok", total_results=total, articles=sample[: self.page_size])
