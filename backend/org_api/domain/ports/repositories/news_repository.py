"""
News Repository Port - Paged news listing.
Implementation: org_api/infrastructure/persistence/sql_news_repository.py
"""

from abc import ABC, abstractmethod

from org_api.domain.value_objects import NewsFilters, Pagination, RowPage


class NewsRepository(ABC):
    @abstractmethod
    async def list_page(
        self, filters: NewsFilters, pagination: Pagination
    ) -> RowPage: ...
