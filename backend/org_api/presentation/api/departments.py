"""Departments API Router - Paged departments by type, period year and acronym."""

from typing import Optional

from fastapi import APIRouter, Query, Request
from dishka.integrations.fastapi import FromDishka, inject

from org_api.application.dto import DepartmentDTO
from org_api.application.queries.departments import (
    ListDepartmentsHandler,
    ListDepartmentsQuery,
)
from org_api.domain.ports import RateLimiter
from org_api.presentation.api.listing import serve_listing
from org_api.presentation.dependencies.params import (
    parse_department_filters,
    parse_pagination,
)
from org_api.presentation.envelope import ERROR_RESPONSES, SuccessEnvelope

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get(
    "",
    response_model=SuccessEnvelope[DepartmentDTO],
    responses=ERROR_RESPONSES,
    summary="Get departments by type, year, and optional acronym",
)
@inject
async def list_departments(
    request: Request,
    handler: FromDishka[ListDepartmentsHandler],
    rate_limiter: FromDishka[RateLimiter],
    page: Optional[str] = Query(None, description="Page number (minimum 1, default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (1-50, default 10)"),
    department_type: Optional[str] = Query(
        None,
        alias="type",
        description="be = Badan Eksekutif, dp = Dewan Perwakilan",
    ),
    year: Optional[str] = Query(None, description="Period year, e.g. 2024"),
    acronym: Optional[str] = Query(None, description="Case-insensitive acronym substring"),
):
    """
    Returns departments ordered by acronym, each with its period and programs.

    An unknown `type` is rejected with 400 and the allowed values.
    """

    async def execute():
        query = ListDepartmentsQuery(
            filters=parse_department_filters(department_type, year, acronym),
            pagination=parse_pagination(page, limit),
        )
        return await handler.execute(query)

    return await serve_listing(request, "departments", rate_limiter, execute)
