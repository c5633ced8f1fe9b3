from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple

import pytest
import requests

from news_search.config import ClientConfig
from news_search.providers.newsapi_provider import NewsAPIProvider


class FakeResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stands in for ``requests.Session`` and records each GET."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.requests: List[Tuple[str, Any]] = []

    def get(self, url: str, timeout: Any = None) -> FakeResponse:
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


SAMPLE_BODY = {
    "status": "ok",
    "totalResults": 2,
    "articles": [
        {
            "source": {"id": "the-washington-post", "name": "The Washington Post"},
            "author": "Hannah Natanson",
            "title": "EPA staffers put on leave",
            "description": "Employees who signed a letter of dissent were placed on leave.",
            "url": "https://www.washingtonpost.com/climate-environment/epa-dissent/",
            "urlToImage": "https://www.washingtonpost.com/epa.jpg",
            "publishedAt": "2025-07-03T23:35:10Z",
            "content": "The administration has placed on leave roughly 140 staffers",
        },
        {
            "source": {"id": None, "name": "ABC News"},
            "author": None,
            "title": "'Reservoir Dogs' star dies at 67",
            "description": None,
            "url": "https://abcnews.go.com/GMA/Culture/reservoir-dogs",
            "urlToImage": None,
            "publishedAt": "2025-07-03T23:29:36Z",
            "content": None,
        },
    ],
}


@pytest.fixture
def make_provider():
    def _make(status_code: int = 200, body: Any = SAMPLE_BODY, error: Optional[Exception] = None, page_size: int = 20):
        text = body if isinstance(body, str) else json.dumps(body)
        session = FakeSession(FakeResponse(status_code, text), error=error)
        provider = NewsAPIProvider(ClientConfig(api_key="test-key", page_size=page_size), session=session)
        return provider, session

    return _make


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError(
        "HTTPSConnectionPool(host='newsapi.org', port=443): Max retries exceeded with url: "
        "/v2/everything?q=epa&pageSize=20&page=1&apiKey=test-key&sortBy=publishedAt&language=en"
    )
