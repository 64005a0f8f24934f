"""Shared application building blocks."""

from org_api.application.common.interfaces import Query, QueryHandler
from org_api.application.common.aggregation import Nested, RowAggregator

__all__ = [
    "Query",
    "QueryHandler",
    "Nested",
    "RowAggregator",
]
