import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from org_api.observability import observe_request_latency


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency per route template and status code."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        # Route template keeps label cardinality bounded (unmatched paths share one label)
        route = request.scope.get("route")
        route_path = getattr(route, "path", "unmatched")
        observe_request_latency(request.method, route_path, response.status_code, duration)
        return response
