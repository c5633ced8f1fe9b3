from __future__ import annotations

from typing import Optional


class NewsSearchError(Exception):
    """Base class for errors raised by the news search app."""


class TransportError(NewsSearchError):
    """The outbound request never produced a response (connection, DNS, timeout)."""


class APIError(NewsSearchError):
    """The remote service answered with a non-success status.

    The message is the raw response body.
    """

    def __init__(self, body: str, status_code: Optional[int] = None) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class ParseError(NewsSearchError):
    """The response body could not be decoded into ``SearchResults``."""


class ConfigError(NewsSearchError):
    """Required configuration is missing or malformed."""


class TemplateError(NewsSearchError):
    """The page template could not be loaded."""
