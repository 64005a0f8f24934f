"""HTTP middleware."""

from org_api.presentation.middleware.correlation_id import CorrelationIdMiddleware
from org_api.presentation.middleware.request_metrics import RequestMetricsMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestMetricsMiddleware",
]
