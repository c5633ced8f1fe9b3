from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100
DEFAULT_ENDPOINT = "https://newsapi.org/v2/everything"


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Settings shared read-only by every call the API client makes."""

    api_key: str
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page_size > MAX_PAGE_SIZE:
            object.__setattr__(self, "page_size", MAX_PAGE_SIZE)


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Runtime configuration for the web process."""

    client: ClientConfig
    port: int = 8080
    endpoint: str = DEFAULT_ENDPOINT
    offline: bool = False

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = ".env") -> "AppConfig":
        if dotenv_path is not None:
            _load_env_file(dotenv_path)

        api_key = os.getenv("NEWS_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("NEWS_API_KEY is not set")

        return cls(
            client=ClientConfig(
                api_key=api_key,
                page_size=_parse_int("NEWS_PAGE_SIZE", os.getenv("NEWS_PAGE_SIZE"), default=20),
            ),
            port=_parse_int("PORT", os.getenv("PORT"), default=8080),
            endpoint=os.getenv("NEWS_API_ENDPOINT") or DEFAULT_ENDPOINT,
            offline=os.getenv("NEWS_SEARCH_OFFLINE", "").strip().lower() in {"1", "true", "yes"},
        )


def _load_env_file(path: str) -> None:
    if not Path(path).is_file():
        logger.warning("Environment file %s not found, using process environment only", path)
        return
    load_dotenv(path, override=False)


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer if set") from None
