"""Users API Router - Members with their departments, periods and positions."""

from typing import Optional

from fastapi import APIRouter, Query, Request
from dishka.integrations.fastapi import FromDishka, inject

from org_api.application.dto import UserDTO
from org_api.application.queries.users import ListUsersHandler, ListUsersQuery
from org_api.domain.ports import RateLimiter
from org_api.presentation.api.listing import serve_listing
from org_api.presentation.dependencies.params import (
    parse_pagination,
    parse_user_filters,
)
from org_api.presentation.envelope import ERROR_RESPONSES, SuccessEnvelope

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=SuccessEnvelope[UserDTO],
    responses=ERROR_RESPONSES,
    summary="Get users with pagination, sorting, and filtering",
)
@inject
async def list_users(
    request: Request,
    handler: FromDishka[ListUsersHandler],
    rate_limiter: FromDishka[RateLimiter],
    page: Optional[str] = Query(None, description="Page number (minimum 1, default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (1-50, default 10)"),
    order_by: Optional[str] = Query(None, alias="orderBy", description="name (default) or username"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    period_years: Optional[str] = Query(
        None, alias="periodYears", description="Comma-separated years, e.g. 2024,2025"
    ),
    department_ids: Optional[str] = Query(
        None, alias="departmentIds", description="Comma-separated department IDs"
    ),
    position_names: Optional[str] = Query(
        None, alias="positionNames", description="Comma-separated names, e.g. ketua,staff"
    ),
):
    """
    Returns a paginated list of users.

    Filters combine with AND and also narrow the nested lists to the matching
    departments, periods and positions.
    """

    async def execute():
        query = ListUsersQuery(
            filters=parse_user_filters(
                order_by, order, period_years, department_ids, position_names
            ),
            pagination=parse_pagination(page, limit),
        )
        return await handler.execute(query)

    return await serve_listing(request, "users", rate_limiter, execute)
