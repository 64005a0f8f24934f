"""
Statement helpers shared by the SQL repositories.

Values that cannot be stored in the column they are compared against
(e.g. a 20-digit year against an INTEGER column) can never match; they are
turned into a false predicate instead of being bound.
"""

import asyncio
from typing import Any, Iterable, Sequence

from sqlalchemy import (
    ColumnElement,
    FromClause,
    Integer,
    Select,
    cast,
    distinct,
    false,
    func,
    select,
)

from org_api.domain.ports import Database
from org_api.domain.value_objects import RowPage, SortOrder

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


def prefixed(source: FromClause, names: Iterable[str], prefix: str) -> list[ColumnElement]:
    """`source.<name> AS <prefix><name>` for each column name."""
    return [source.c[name].label(prefix + name) for name in names]


def directed(column: ColumnElement, order: SortOrder) -> ColumnElement:
    return column.asc() if order is SortOrder.ASC else column.desc()


def count_distinct(column: ColumnElement) -> Select:
    return select(cast(func.count(distinct(column)), Integer).label("total"))


def _fits_int4(value: int) -> bool:
    return INT4_MIN <= value <= INT4_MAX


def int4_equals(column: ColumnElement, value: int) -> ColumnElement:
    return column == value if _fits_int4(value) else false()


def int4_in(column: ColumnElement, values: Sequence[int]) -> ColumnElement:
    storable = [value for value in values if _fits_int4(value)]
    return column.in_(storable) if storable else false()


def read_total(count_rows: list[dict[str, Any]]) -> int:
    if not count_rows:
        return 0
    return int(count_rows[0].get("total") or 0)


async def fetch_page(db: Database, page: Select, count: Select) -> RowPage:
    """Run the page and count statements concurrently."""
    rows, count_rows = await asyncio.gather(db.fetch_all(page), db.fetch_all(count))
    return RowPage(rows=rows, total=read_total(count_rows))
