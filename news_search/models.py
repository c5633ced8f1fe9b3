from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional

from .errors import ParseError

# fromisoformat before 3.11 only accepts 3 or 6 fractional digits
_FRACTION_RE = re.compile(r"(?<=:\d\d)\.(\d+)")


@dataclass(slots=True, frozen=True)
class SearchQuery:
    """Query parameters of one incoming search request."""

    text: str = ""
    page: str = "1"

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "SearchQuery":
        return cls(text=args.get("q") or "", page=args.get("page") or "1")


@dataclass(slots=True, frozen=True)
class Article:
    """A single article from the everything endpoint."""

    source_id: Optional[str]
    source_name: str
    author: str
    title: str
    description: str
    url: str
    image_url: str
    published_at: Optional[datetime]
    content: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Article":
        if not isinstance(data, Mapping):
            raise ParseError(f"article must be an object, got {type(data).__name__}")
        source = data.get("source") or {}
        if not isinstance(source, Mapping):
            raise ParseError("article source must be an object")
        source_id = source.get("id")
        return cls(
            source_id=str(source_id) if source_id is not None else None,
            source_name=_text(source, "name"),
            author=_text(data, "author"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            url=_text(data, "url"),
            image_url=_text(data, "urlToImage"),
            published_at=_parse_date(data.get("publishedAt")),
            content=_text(data, "content"),
        )


@dataclass(slots=True)
class SearchResults:
    """Decoded body of an everything response."""

    status: str
    total_results: int
    articles: List[Article] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "SearchResults":
        if not isinstance(payload, Mapping):
            raise ParseError("response body must be a JSON object")
        total = payload.get("totalResults", 0)
        if total is None:
            total = 0
        if isinstance(total, bool) or not isinstance(total, int):
            raise ParseError(f"totalResults must be an integer, got {total!r}")
        articles = payload.get("articles") or []
        if not isinstance(articles, list):
            raise ParseError("articles must be an array")
        return cls(
            status=_text(payload, "status"),
            total_results=total,
            articles=[Article.from_dict(item) for item in articles],
        )


@dataclass(slots=True)
class SearchPage:
    """What the results page needs to render one page of a search."""

    query: str
    page: int
    total_pages: int
    results: SearchResults

    @classmethod
    def build(cls, query: SearchQuery, results: SearchResults, page_size: int) -> "SearchPage":
        page = int(query.page)
        total_pages = math.ceil(results.total_results / page_size) if page_size > 0 else 0
        return cls(query=query.text, page=page, total_pages=total_pages, results=results)

    @property
    def next_page(self) -> int:
        return self.page + 1

    @property
    def has_next(self) -> bool:
        return self.next_page <= self.total_pages


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _six_digit_fraction(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def _parse_date(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ParseError(f"publishedAt must be a string, got {type(value).__name__}")
    normalized = _FRACTION_RE.sub(_six_digit_fraction, value.replace("Z", "+00:00"), count=1)
    try:
        return datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ParseError(f"invalid publishedAt {value!r}") from exc
