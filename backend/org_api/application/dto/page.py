"""One page of listing results plus what the envelope metadata needs."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from org_api.domain.value_objects import Pagination

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages(self.total)
