"""News Search package initializer."""

from .config import AppConfig, ClientConfig
from .providers.newsapi_provider import NewsAPIProvider
from .web import create_app

__all__ = ["AppConfig", "ClientConfig", "NewsAPIProvider", "create_app"]
