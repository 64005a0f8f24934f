"""
Pagination Value Object - A 1-based page window over distinct parent entities.
"""

import math
from dataclasses import dataclass

# OFFSET is bound as a signed 64-bit integer
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    limit: int = 10

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.offset > MAX_OFFSET:
            raise ValueError("Page is too large")

    @staticmethod
    def last_page(limit: int) -> int:
        """Highest page whose offset still fits MAX_OFFSET."""
        return MAX_OFFSET // limit + 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)
