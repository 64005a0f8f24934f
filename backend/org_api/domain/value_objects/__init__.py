"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from org_api.domain.value_objects.pagination import MAX_OFFSET, Pagination
from org_api.domain.value_objects.sort_order import SortOrder
from org_api.domain.value_objects.department_type import DepartmentType
from org_api.domain.value_objects.filters import (
    DepartmentFilters,
    NewsFilters,
    UserFilters,
    UserOrderField,
)
from org_api.domain.value_objects.row_page import RowPage

__all__ = [
    "MAX_OFFSET",
    "Pagination",
    "SortOrder",
    "DepartmentType",
    "DepartmentFilters",
    "NewsFilters",
    "UserFilters",
    "UserOrderField",
    "RowPage",
]
