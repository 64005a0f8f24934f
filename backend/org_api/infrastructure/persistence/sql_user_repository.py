"""
SQL User Repository - Implements UserRepository port.

Users are filtered through their many-to-many links:
- periodYears    -> _PeriodToUser / periods.year
- departmentIds  -> _DepartmentToUser / departments.id
- positionNames  -> _PositionToUser / positions.name

Each supplied filter becomes an EXISTS on the page predicate, so paging and
counting happen per user. Children are then read with one query per relation
for the users on the page, with the same filter applied, so the nested lists
only hold matching children:

    page rows   {id, name, ...}                      one per user, in page order
    child rows  {id: <user id>, department__id, ...}  per relation, in child order

The rows are returned in that order; the aggregator attaches each child row
to the user already created by its page row.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from sqlalchemy import ColumnElement, Select, Table, select

from org_api.domain.ports import Database
from org_api.domain.ports.repositories import UserRepository
from org_api.domain.value_objects import Pagination, RowPage, UserFilters
from org_api.infrastructure.persistence.sql_common import (
    count_distinct,
    directed,
    fetch_page,
    int4_in,
    prefixed,
)
from org_api.infrastructure.persistence.tables import (
    department_to_user,
    departments,
    period_to_user,
    periods,
    position_to_user,
    positions,
    users,
)

logger = logging.getLogger(__name__)

USER_COLUMNS = ("id", "name", "username", "image", "bio")


def _in(column: ColumnElement, values: Sequence[Any]) -> ColumnElement:
    return column.in_(values)


@dataclass(frozen=True)
class _Association:
    link: Table
    link_key: str  # column on the link table pointing at the child
    child: Table
    filter_column: str
    matches: Callable[[ColumnElement, Sequence[Any]], ColumnElement]
    prefix: str
    columns: Sequence[str]
    order: Sequence[str]

    def condition(self, child: Any, values: Sequence[Any]) -> ColumnElement:
        return self.matches(child.c[self.filter_column], values)


DEPARTMENTS = _Association(
    department_to_user, "department_id", departments, "id", _in,
    "department__", ("id", "name", "acronym", "period_year", "image"), ("acronym", "id"),
)
POSITIONS = _Association(
    position_to_user, "position_id", positions, "name", _in,
    "position__", ("id", "name", "department_id"), ("name", "id"),
)
PERIODS = _Association(
    period_to_user, "period_id", periods, "year", int4_in,
    "period__", ("id", "year", "name"), ("year", "id"),
)


def _filter_values(filters: UserFilters) -> list[tuple[_Association, tuple[Any, ...]]]:
    return [
        (DEPARTMENTS, filters.department_ids),
        (POSITIONS, filters.position_names),
        (PERIODS, filters.period_years),
    ]


def _linked(assoc: _Association, values: Sequence[Any]) -> ColumnElement:
    """EXISTS a link from the current user to a child whose filter column is in values."""
    link = assoc.link.alias()
    child = assoc.child.alias()
    return (
        select(link.c.user_id)
        .join(child, child.c.id == link.c[assoc.link_key])
        .where(link.c.user_id == users.c.id, assoc.condition(child, values))
        .exists()
    )


def _predicates(filters: UserFilters) -> list[ColumnElement]:
    return [
        _linked(assoc, values)
        for assoc, values in _filter_values(filters)
        if values
    ]


def build_page_statement(filters: UserFilters, pagination: Pagination) -> Select:
    sort_column = users.c[filters.order_by.value]
    return (
        select(*(users.c[name] for name in USER_COLUMNS))
        .where(*_predicates(filters))
        .order_by(directed(sort_column, filters.order), users.c.id)
        .limit(pagination.limit)
        .offset(pagination.offset)
    )


def build_count_statement(filters: UserFilters) -> Select:
    return count_distinct(users.c.id).where(*_predicates(filters))


def build_child_statements(filters: UserFilters, user_ids: Sequence[str]) -> list[Select]:
    """One statement per relation, for the given users only."""
    statements = []
    for assoc, values in _filter_values(filters):
        link = assoc.link
        child = assoc.child
        statement = (
            select(link.c.user_id.label("id"), *prefixed(child, assoc.columns, assoc.prefix))
            .join(child, child.c.id == link.c[assoc.link_key])
            .where(link.c.user_id.in_(user_ids))
            .order_by(*(child.c[name] for name in assoc.order))
        )
        if values:
            statement = statement.where(assoc.condition(child, values))
        statements.append(statement)
    return statements


class SqlUserRepository(UserRepository):
    _db: Database

    def __init__(self, db: Database):
        self._db = db

    async def list_page(self, filters: UserFilters, pagination: Pagination) -> RowPage:
        page = build_page_statement(filters, pagination)
        logger.debug("User page query: %s", page)
        result = await fetch_page(self._db, page, build_count_statement(filters))
        if not result.rows:
            return result

        user_ids = [row["id"] for row in result.rows]
        child_rows = await asyncio.gather(
            *(self._db.fetch_all(statement)
              for statement in build_child_statements(filters, user_ids))
        )
        rows = list(result.rows)
        for relation_rows in child_rows:
            rows.extend(relation_rows)
        return RowPage(rows=rows, total=result.total)
