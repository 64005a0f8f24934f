"""
Persistence Layer - Database implementations.

Contains the Prisma store handle and SQL repository implementations for
domain ports.
"""

from org_api.infrastructure.persistence.prisma_database import (
    PrismaDatabase,
    compile_statement,
    connect_prisma,
    datasource_url,
)
from org_api.infrastructure.persistence.sql_department_repository import (
    SqlDepartmentRepository,
)
from org_api.infrastructure.persistence.sql_news_repository import (
    SqlNewsRepository,
)
from org_api.infrastructure.persistence.sql_user_repository import (
    SqlUserRepository,
)

__all__ = [
    "PrismaDatabase",
    "compile_statement",
    "connect_prisma",
    "datasource_url",
    "SqlDepartmentRepository",
    "SqlNewsRepository",
    "SqlUserRepository",
]
