"""
ListNews Query - Paged published posts carrying the news tag.

Posts are ordered by publication time (direction from the query); each item
nests its author and the matching post tags.
"""

from dataclasses import dataclass, field

from org_api.application.common import Nested, Query, QueryHandler, RowAggregator
from org_api.application.dto import NewsDTO, PageResult
from org_api.domain.ports.repositories import NewsRepository
from org_api.domain.value_objects import NewsFilters, Pagination

NEWS_AGGREGATOR = RowAggregator(
    columns=(
        "id",
        "title",
        "meta_title",
        "slug",
        "content",
        "image",
        "published_at",
        "created_at",
        "updated_at",
    ),
    nested=(
        Nested("author", "author__", ("id", "name", "username", "image"), many=False),
        Nested("post_tags", "post_tag__", ("title", "slug")),
    ),
)


@dataclass(frozen=True)
class ListNewsQuery(Query[PageResult[NewsDTO]]):
    filters: NewsFilters
    pagination: Pagination = field(default_factory=Pagination)


class ListNewsHandler(QueryHandler[PageResult[NewsDTO]]):
    def __init__(self, news_repository: NewsRepository):
        self._repo = news_repository

    async def execute(self, query: ListNewsQuery) -> PageResult[NewsDTO]:
        page = await self._repo.list_page(query.filters, query.pagination)
        records = NEWS_AGGREGATOR.aggregate(page.rows)
        return PageResult(
            items=[NewsDTO.model_validate(record) for record in records],
            total=page.total,
            pagination=query.pagination,
        )
