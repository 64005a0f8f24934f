"""
Department Repository Port - Paged department listing.
Implementation: org_api/infrastructure/persistence/sql_department_repository.py
"""

from abc import ABC, abstractmethod

from org_api.domain.value_objects import DepartmentFilters, Pagination, RowPage


class DepartmentRepository(ABC):
    @abstractmethod
    async def list_page(
        self, filters: DepartmentFilters, pagination: Pagination
    ) -> RowPage: ...
