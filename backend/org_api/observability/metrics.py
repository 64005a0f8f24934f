"""
Prometheus Metrics for the organization directory API.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus scraper

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., rejected requests)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

RATE_LIMITED_TOTAL = Counter(
    "org_api_rate_limited_total",
    "Total number of requests rejected by the rate limiter",
    ["route"],
)

ERRORS_TOTAL = Counter(
    "org_api_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for org_api_errors_total metric."""

    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: presentation/middleware/request_metrics.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_rate_limited(route: str):
    """Call when the rate limiter rejects a request. Integration point: presentation/api/listing.py"""
    RATE_LIMITED_TOTAL.labels(route=route).inc()


def increment_error(error_type: str):
    """Call to record an error occurrence (see MetricsErrorType)."""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_rate_limited",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
