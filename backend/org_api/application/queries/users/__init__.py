"""User queries."""

from org_api.application.queries.users.list_users import (
    USER_AGGREGATOR,
    ListUsersQuery,
    ListUsersHandler,
)

__all__ = [
    "USER_AGGREGATOR",
    "ListUsersQuery",
    "ListUsersHandler",
]
