from __future__ import annotations

from pathlib import Path
from typing import Union

import jinja2
from flask import Flask, render_template, request

from .errors import NewsSearchError, TemplateError
from .models import SearchPage, SearchQuery
from .providers.base import BaseProvider

PACKAGE_DIR = Path(__file__).resolve().parent
INDEX_TEMPLATE = "index.html"


def create_app(
    provider: BaseProvider,
    template_dir: Union[str, Path, None] = None,
    assets_dir: Union[str, Path, None] = None,
) -> Flask:
    """Build the Flask app with the index, search and asset routes.

    The index template is loaded here so a broken template stops startup
    instead of failing the first request.
    """
    app = Flask(
        __name__,
        template_folder=str(template_dir or PACKAGE_DIR / "templates"),
        static_folder=str(assets_dir or PACKAGE_DIR / "assets"),
        static_url_path="/assets",
    )

    try:
        app.jinja_env.get_template(INDEX_TEMPLATE)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"cannot load {INDEX_TEMPLATE}: {exc}") from exc

    @app.get("/")
    def index():
        return render_template(INDEX_TEMPLATE)

    @app.get("/search")
    def search():
        query = SearchQuery.from_args(request.args)
        try:
            results = provider.fetch_everything(query.text, query.page)
        except NewsSearchError as exc:
            app.logger.error("Search for %r failed: %s", query.text, exc)
            return _plain_error(str(exc))

        try:
            page = SearchPage.build(query, results, provider.page_size)
        except ValueError as exc:
            app.logger.warning("Invalid page number %r", query.page)
            return _plain_error(str(exc))

        return render_template(INDEX_TEMPLATE, search=page)

    return app


def _plain_error(message: str, status: int = 500):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}
