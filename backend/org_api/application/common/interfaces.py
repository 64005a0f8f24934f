"""
Base interfaces for the query side.

Usage:
    @dataclass(frozen=True)
    class ListDepartmentsQuery(Query[PageResult[DepartmentDTO]]):
        filters: DepartmentFilters
        pagination: Pagination

    class ListDepartmentsHandler(QueryHandler[PageResult[DepartmentDTO]]):
        def __init__(self, repo: DepartmentRepository):
            self._repo = repo

        async def execute(self, query: ListDepartmentsQuery) -> PageResult[DepartmentDTO]:
            page = await self._repo.list_page(query.filters, query.pagination)
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
