"""
RateLimitExceededError - Raised when a client is over its request quota.
Maps to: HTTP 429 Too Many Requests
"""

from org_api.domain.exceptions.api_error import ApiError, ResponseCode


class RateLimitExceededError(ApiError):
    status_code = 429
    code = ResponseCode.RATE_LIMITED

    def __init__(self, reset_at: int):
        # reset_at is a unix timestamp in milliseconds
        super().__init__("Too many requests", {"resetTimestamp": reset_at})
        self.reset_at = reset_at
