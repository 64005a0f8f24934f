"""
ListUsers Query - Paged users with their departments, periods and positions.

Filters narrow both the users returned and the nested lists: asking for
positionNames=ketua returns users holding "ketua", each listing only that
position.
"""

from dataclasses import dataclass, field

from org_api.application.common import Nested, Query, QueryHandler, RowAggregator
from org_api.application.dto import PageResult, UserDTO
from org_api.domain.ports.repositories import UserRepository
from org_api.domain.value_objects import Pagination, UserFilters

USER_AGGREGATOR = RowAggregator(
    columns=("id", "name", "username", "image", "bio"),
    nested=(
        Nested(
            "departments",
            "department__",
            ("id", "name", "acronym", "period_year", "image"),
        ),
        Nested("periods", "period__", ("id", "year", "name")),
        Nested("positions", "position__", ("id", "name", "department_id")),
    ),
)


@dataclass(frozen=True)
class ListUsersQuery(Query[PageResult[UserDTO]]):
    filters: UserFilters = field(default_factory=UserFilters)
    pagination: Pagination = field(default_factory=Pagination)


class ListUsersHandler(QueryHandler[PageResult[UserDTO]]):
    def __init__(self, user_repository: UserRepository):
        self._repo = user_repository

    async def execute(self, query: ListUsersQuery) -> PageResult[UserDTO]:
        page = await self._repo.list_page(query.filters, query.pagination)
        records = USER_AGGREGATOR.aggregate(page.rows)
        return PageResult(
            items=[UserDTO.model_validate(record) for record in records],
            total=page.total,
            pagination=query.pagination,
        )
