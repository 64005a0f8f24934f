"""
Shared request flow for the listing endpoints.

    admit (rate limiter) ──► parse parameters ──► run query ──► envelope

Parameter parsing happens inside `execute`, after admission, so a rejected
client never gets as far as validation or the store. Every failure leaves
this function as an error envelope; nothing propagates to the framework.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from org_api.application.dto import PageResult
from org_api.domain.exceptions import (
    ApiError,
    InvalidParameterError,
    RateLimitExceededError,
)
from org_api.domain.ports import RateLimiter
from org_api.observability import (
    MetricsErrorType,
    increment_error,
    increment_rate_limited,
)
from org_api.presentation.dependencies.client import get_client_identity
from org_api.presentation.envelope import (
    api_error_response,
    internal_error_response,
    success_response,
)

logger = logging.getLogger(__name__)


async def serve_listing(
    request: Request,
    resource: str,
    rate_limiter: RateLimiter,
    execute: Callable[[], Awaitable[PageResult]],
) -> JSONResponse:
    try:
        admission = await rate_limiter.admit(get_client_identity(request))
        if not admission.allowed:
            increment_rate_limited(resource)
            raise RateLimitExceededError(admission.reset_at)

        result = await execute()
        return success_response(result)

    except ApiError as e:
        if isinstance(e, InvalidParameterError):
            increment_error(MetricsErrorType.BAD_REQUEST)
        logger.info(f"Rejected {resource} request: {e.code.value} {e.message}")
        return api_error_response(e)
    except Exception as e:
        logger.exception(f"Error fetching {resource}: {e}")
        increment_error(MetricsErrorType.INTERNAL)
        return internal_error_response(e)
