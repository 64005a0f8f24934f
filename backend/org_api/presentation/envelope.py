"""
Response envelope shared by every listing endpoint.

Success:
    {"data": [...], "timestamp": "2024-05-01T10:00:00.000Z", "code": "SUCCESS",
     "metadata": {"total": 12, "page": 1, "limit": 10, "totalPages": 2}}

Error:
    {"error": "Invalid type value", "timestamp": "...", "code": "BAD_REQUEST",
     "metadata": {"allowedTypes": ["be", "dp"]}}
"""

import math
import time
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from org_api.application.dto import CamelModel, PageResult
from org_api.domain.exceptions import ApiError, ResponseCode, RateLimitExceededError

T = TypeVar("T")


# ==================== RESPONSE MODELS (OpenAPI) ====================
class PageMetadata(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class SuccessEnvelope(BaseModel, Generic[T]):
    data: list[T]
    timestamp: str
    code: str = ResponseCode.SUCCESS.value
    metadata: PageMetadata


class ErrorEnvelope(BaseModel):
    error: str
    timestamp: str
    code: str
    metadata: dict[str, Any] = {}


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorEnvelope, "description": "Invalid parameter"},
    429: {"model": ErrorEnvelope, "description": "Too many requests"},
    500: {"model": ErrorEnvelope, "description": "Internal server error"},
}


# ==================== BUILDERS ====================
def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_response(result: PageResult) -> JSONResponse:
    metadata = PageMetadata(
        total=result.total,
        page=result.pagination.page,
        limit=result.pagination.limit,
        total_pages=result.total_pages,
    )
    return JSONResponse(
        status_code=200,
        content={
            "data": [item.to_wire() for item in result.items],
            "timestamp": utc_timestamp(),
            "code": ResponseCode.SUCCESS.value,
            "metadata": metadata.to_wire(),
        },
    )


def error_response(
    code: ResponseCode,
    message: str,
    status_code: int,
    metadata: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "timestamp": utc_timestamp(),
            "code": code.value,
            "metadata": metadata or {},
        },
        headers=headers,
    )


def api_error_response(error: ApiError) -> JSONResponse:
    headers = None
    if isinstance(error, RateLimitExceededError):
        retry_after = max(0, math.ceil(error.reset_at / 1000 - time.time()))
        headers = {"Retry-After": str(retry_after)}
    return error_response(
        error.code,
        error.message,
        error.status_code,
        metadata=error.metadata,
        headers=headers,
    )


def internal_error_response(exc: Exception) -> JSONResponse:
    return error_response(
        ResponseCode.INTERNAL_ERROR,
        "Internal server error",
        500,
        metadata={"message": str(exc)},
    )
