from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

import requests

from ..config import DEFAULT_ENDPOINT, ClientConfig
from ..errors import APIError, ParseError, TransportError
from ..models import SearchResults
from .base import BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class NewsAPIProvider(BaseProvider):
    """Searches newsapi.org's everything endpoint."""

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not config.api_key:
            raise ValueError("NewsAPIProvider requires an API key")
        self._config = config
        self._session = session or requests.Session()
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def page_size(self) -> int:
        return self._config.page_size

    def build_url(self, query: str, page: str) -> str:
        params = {
            "q": query,
            "pageSize": self._config.page_size,
            "page": page,
            "apiKey": self._config.api_key,
            "sortBy": "publishedAt",
            "language": "en",
        }
        return f"{self._endpoint}?{urlencode(params)}"

    def fetch_everything(self, query: str, page: str) -> SearchResults:
        logger.debug("Searching %s for %r (page %s)", self._endpoint, query, page)
        try:
            response = self._session.get(self.build_url(query, page), timeout=self._timeout)
            body = response.text
        except requests.RequestException as exc:
            # requests puts the full URL, API key included, in its messages
            message = f"{type(exc).__name__} while contacting {self._endpoint}"
            logger.warning("News API request failed: %s", message)
            raise TransportError(message) from exc

        if response.status_code != requests.codes.ok:
            logger.warning("News API returned HTTP %s", response.status_code)
            raise APIError(body, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(f"invalid JSON in News API response: {exc}") from exc
        return SearchResults.from_dict(payload)
