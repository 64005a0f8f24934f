"""
Listing filters - Optional constraints for each listing endpoint.

A field left as None (or an empty tuple) imposes no constraint.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from org_api.domain.value_objects.department_type import DepartmentType
from org_api.domain.value_objects.sort_order import SortOrder


@dataclass(frozen=True)
class DepartmentFilters:
    type: Optional[DepartmentType] = None
    year: Optional[int] = None
    acronym: Optional[str] = None  # lower-cased substring


@dataclass(frozen=True)
class NewsFilters:
    tag_title: str
    search: Optional[str] = None  # lower-cased substring of the title
    order: SortOrder = SortOrder.DESC


class UserOrderField(str, Enum):
    NAME = "name"
    USERNAME = "username"


@dataclass(frozen=True)
class UserFilters:
    period_years: tuple[int, ...] = ()
    department_ids: tuple[str, ...] = ()
    position_names: tuple[str, ...] = ()
    order_by: UserOrderField = UserOrderField.NAME
    order: SortOrder = SortOrder.ASC
