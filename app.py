from __future__ import annotations

import logging
import os
import sys

from news_search import AppConfig, NewsAPIProvider, create_app
from news_search.errors import ConfigError, TemplateError
from news_search.providers.mock_provider import MockProvider

logger = logging.getLogger("news_search")


def main() -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = AppConfig.from_env()
        if config.offline:
            logger.info("Offline mode: serving canned articles")
            provider = MockProvider(page_size=config.client.page_size)
        else:
            provider = NewsAPIProvider(config.client, endpoint=config.endpoint)
        app = create_app(provider)
    except (ConfigError, TemplateError) as exc:
        logger.error("Startup failed: %s", exc)
        return 1

    try:
        app.run(host="0.0.0.0", port=config.port, threaded=True)
    except OSError as exc:
        logger.error("Cannot listen on port %s: %s", config.port, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
