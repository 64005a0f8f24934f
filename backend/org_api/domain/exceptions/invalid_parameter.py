"""
InvalidParameterError - Raised when an enum-constrained query parameter is invalid.
Maps to: HTTP 400 Bad Request
"""

from typing import Sequence

from org_api.domain.exceptions.api_error import ApiError, ResponseCode


class InvalidParameterError(ApiError):
    status_code = 400
    code = ResponseCode.BAD_REQUEST

    def __init__(self, message: str, metadata_key: str, allowed: Sequence[str]):
        super().__init__(message, {metadata_key: list(allowed)})
        self.allowed = list(allowed)
