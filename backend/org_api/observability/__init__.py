"""Observability package for the organization directory API."""

from org_api.observability.metrics import (
    observe_request_latency,
    increment_rate_limited,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
)

__all__ = [
    "observe_request_latency",
    "increment_rate_limited",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
