"""
PORTS - Interfaces the infrastructure layer implements.
"""

from org_api.domain.ports.database import Database
from org_api.domain.ports.rate_limiter import Admission, RateLimiter

__all__ = [
    "Database",
    "Admission",
    "RateLimiter",
]
