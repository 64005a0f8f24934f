"""News queries."""

from org_api.application.queries.news.list_news import (
    NEWS_AGGREGATOR,
    ListNewsQuery,
    ListNewsHandler,
)

__all__ = [
    "NEWS_AGGREGATOR",
    "ListNewsQuery",
    "ListNewsHandler",
]
