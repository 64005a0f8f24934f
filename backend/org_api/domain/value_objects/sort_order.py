"""
SortOrder Value Object - Sort direction for listings.
"""

from enum import Enum


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
