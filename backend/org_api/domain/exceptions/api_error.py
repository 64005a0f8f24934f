"""
ApiError - Base class for errors rendered as an error envelope.
"""

from enum import Enum
from typing import Any, Optional


class ResponseCode(str, Enum):
    """Value of the `code` field in every response envelope."""

    SUCCESS = "SUCCESS"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMITED = "TOO_MANY_REQUESTS"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiError(Exception):
    """Error carrying everything needed to build an error response."""

    status_code: int = 500
    code: ResponseCode = ResponseCode.INTERNAL_ERROR

    def __init__(self, message: str, metadata: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.metadata = metadata or {}
