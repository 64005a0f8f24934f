"""
ListDepartments Query - Paged departments with period and programs.

Response item format:
{
    "id": "clxy...",
    "name": "Komunikasi dan Informasi",
    "acronym": "kominfo",
    "image": null,
    "description": "...",
    "type": "BE",
    "periodYear": 2024,
    "period": {"id": "...", "year": 2024, "name": "Kabinet ..."},
    "programs": [{"id": "...", "content": "..."}]
}
"""

from dataclasses import dataclass, field

from org_api.application.common import Nested, Query, QueryHandler, RowAggregator
from org_api.application.dto import DepartmentDTO, PageResult
from org_api.domain.ports.repositories import DepartmentRepository
from org_api.domain.value_objects import DepartmentFilters, Pagination

DEPARTMENT_AGGREGATOR = RowAggregator(
    columns=(
        "id",
        "name",
        "acronym",
        "image",
        "description",
        "type",
        "period_year",
    ),
    nested=(
        Nested("period", "period__", ("id", "year", "name"), many=False),
        Nested("programs", "program__", ("id", "content")),
    ),
)


# ==================== QUERY ====================


@dataclass(frozen=True)
class ListDepartmentsQuery(Query[PageResult[DepartmentDTO]]):
    filters: DepartmentFilters = field(default_factory=DepartmentFilters)
    pagination: Pagination = field(default_factory=Pagination)


# ==================== HANDLER ====================


class ListDepartmentsHandler(QueryHandler[PageResult[DepartmentDTO]]):
    def __init__(self, department_repository: DepartmentRepository):
        self._repo = department_repository

    async def execute(self, query: ListDepartmentsQuery) -> PageResult[DepartmentDTO]:
        page = await self._repo.list_page(query.filters, query.pagination)
        records = DEPARTMENT_AGGREGATOR.aggregate(page.rows)
        return PageResult(
            items=[DepartmentDTO.model_validate(record) for record in records],
            total=page.total,
            pagination=query.pagination,
        )
