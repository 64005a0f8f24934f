"""Department queries."""

from org_api.application.queries.departments.list_departments import (
    DEPARTMENT_AGGREGATOR,
    ListDepartmentsQuery,
    ListDepartmentsHandler,
)

__all__ = [
    "DEPARTMENT_AGGREGATOR",
    "ListDepartmentsQuery",
    "ListDepartmentsHandler",
]
