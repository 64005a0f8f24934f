"""Rate limiting adapters."""

from org_api.infrastructure.rate_limit.limits_rate_limiter import LimitsRateLimiter

__all__ = ["LimitsRateLimiter"]
