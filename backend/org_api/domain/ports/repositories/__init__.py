"""
REPOSITORY PORTS - Read-side listing interfaces

Each repository port:
- Is an abstract base class (ABC)
- Returns flat join rows for one page of parents plus the filtered total
- Does NOT specify how the SQL is built

Infrastructure layer provides implementations.
"""

from org_api.domain.ports.repositories.department_repository import DepartmentRepository
from org_api.domain.ports.repositories.news_repository import NewsRepository
from org_api.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "DepartmentRepository",
    "NewsRepository",
    "UserRepository",
]
