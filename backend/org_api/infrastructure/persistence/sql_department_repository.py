"""
SQL Department Repository - Implements DepartmentRepository port.

Row query (page of departments first, then children):

    SELECT d.*, period.*, program.*
    FROM (SELECT ... FROM departments WHERE <filters>
          ORDER BY acronym, id LIMIT :limit OFFSET :offset) AS d
    LEFT JOIN periods  ON periods.year = d.period_year
    LEFT JOIN programs ON programs.department_id = d.id
    ORDER BY d.acronym, d.id, programs.id

Count query: COUNT(DISTINCT departments.id) over the same filters.
"""

import logging

from sqlalchemy import ColumnElement, Select, select

from org_api.domain.ports import Database
from org_api.domain.ports.repositories import DepartmentRepository
from org_api.domain.value_objects import DepartmentFilters, Pagination, RowPage
from org_api.infrastructure.persistence.sql_common import (
    count_distinct,
    fetch_page,
    int4_equals,
    prefixed,
)
from org_api.infrastructure.persistence.tables import departments, periods, programs

logger = logging.getLogger(__name__)

DEPARTMENT_COLUMNS = (
    "id",
    "name",
    "acronym",
    "image",
    "description",
    "type",
    "period_year",
)
PERIOD_COLUMNS = ("id", "year", "name")
PROGRAM_COLUMNS = ("id", "content")


def _predicates(filters: DepartmentFilters) -> list[ColumnElement]:
    clauses = []
    if filters.type is not None:
        clauses.append(departments.c.type == filters.type.stored_value)
    if filters.year is not None:
        clauses.append(int4_equals(departments.c.period_year, filters.year))
    if filters.acronym:
        clauses.append(departments.c.acronym.icontains(filters.acronym, autoescape=True))
    return clauses


def build_page_statement(filters: DepartmentFilters, pagination: Pagination) -> Select:
    window = (
        select(*(departments.c[name] for name in DEPARTMENT_COLUMNS))
        .where(*_predicates(filters))
        .order_by(departments.c.acronym, departments.c.id)
        .limit(pagination.limit)
        .offset(pagination.offset)
        .subquery("d")
    )
    period = periods.alias("p")
    program = programs.alias("pr")
    return (
        select(
            *window.c,
            *prefixed(period, PERIOD_COLUMNS, "period__"),
            *prefixed(program, PROGRAM_COLUMNS, "program__"),
        )
        .select_from(
            window.outerjoin(period, period.c.year == window.c.period_year).outerjoin(
                program, program.c.department_id == window.c.id
            )
        )
        .order_by(window.c.acronym, window.c.id, program.c.id)
    )


def build_count_statement(filters: DepartmentFilters) -> Select:
    return count_distinct(departments.c.id).where(*_predicates(filters))


class SqlDepartmentRepository(DepartmentRepository):
    _db: Database

    def __init__(self, db: Database):
        self._db = db

    async def list_page(
        self, filters: DepartmentFilters, pagination: Pagination
    ) -> RowPage:
        page = build_page_statement(filters, pagination)
        logger.debug("Department page query: %s", page)
        return await fetch_page(self._db, page, build_count_statement(filters))
