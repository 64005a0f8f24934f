"""
DOMAIN EXCEPTIONS - Errors that end a request early

These exceptions are raised by validation and admission logic and caught by
the presentation layer, which renders them through the response envelope.
"""

from org_api.domain.exceptions.api_error import ApiError, ResponseCode
from org_api.domain.exceptions.invalid_parameter import InvalidParameterError
from org_api.domain.exceptions.rate_limit_exceeded import RateLimitExceededError

__all__ = [
    "ApiError",
    "ResponseCode",
    "InvalidParameterError",
    "RateLimitExceededError",
]
