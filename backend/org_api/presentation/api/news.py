"""News API Router - Published posts tagged as news."""

from typing import Optional

from fastapi import APIRouter, Query, Request
from dishka.integrations.fastapi import FromDishka, inject

from org_api.application.dto import NewsDTO
from org_api.application.queries.news import ListNewsHandler, ListNewsQuery
from org_api.domain.ports import RateLimiter
from org_api.presentation.api.listing import serve_listing
from org_api.presentation.dependencies.params import (
    parse_news_filters,
    parse_pagination,
)
from org_api.presentation.envelope import ERROR_RESPONSES, SuccessEnvelope

router = APIRouter(prefix="/news", tags=["news"])


@router.get(
    "",
    response_model=SuccessEnvelope[NewsDTO],
    responses=ERROR_RESPONSES,
    summary="Get news posts with the 'berita' tag",
)
@inject
async def list_news(
    request: Request,
    handler: FromDishka[ListNewsHandler],
    rate_limiter: FromDishka[RateLimiter],
    page: Optional[str] = Query(None, description="Page number (minimum 1, default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (1-50, default 10)"),
    order: Optional[str] = Query(None, description="Publication time order: asc or desc (default)"),
    search: Optional[str] = Query(None, description="Case-insensitive title search"),
):
    """Returns paginated, published news posts with their author and news tag."""

    async def execute():
        query = ListNewsQuery(
            filters=parse_news_filters(order, search),
            pagination=parse_pagination(page, limit),
        )
        return await handler.execute(query)

    return await serve_listing(request, "news", rate_limiter, execute)
