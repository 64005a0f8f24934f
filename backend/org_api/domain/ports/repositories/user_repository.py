"""
User Repository Port - Paged user listing.
Implementation: org_api/infrastructure/persistence/sql_user_repository.py
"""

from abc import ABC, abstractmethod

from org_api.domain.value_objects import UserFilters, Pagination, RowPage


class UserRepository(ABC):
    @abstractmethod
    async def list_page(
        self, filters: UserFilters, pagination: Pagination
    ) -> RowPage: ...
