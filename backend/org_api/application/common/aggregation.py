"""
Row aggregation - Fold flat join rows into nested parent records.

A join of a parent table with its children yields one row per
parent x child pairing (or one row with all-NULL child columns when the
parent has no children). RowAggregator walks those rows once, in order,
keeping an insertion-ordered map of parent id -> record:

    rows                                   output
    ----                                   ------
    {id: 1, program__id: 10, ...}    ──►   {id: 1, programs: [{id: 10}, {id: 11}]}
    {id: 1, program__id: 11, ...}          {id: 2, programs: []}
    {id: 2, program__id: None, ...}

Child columns are read from `<prefix><column>` keys, e.g. `program__content`.
Rows from separate child queries (`{id: <parent id>, position__id: ...}`)
can be appended after the parent rows; they attach to the parents already
seen.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping


@dataclass(frozen=True)
class Nested:
    """How to project one child relation out of a joined row."""

    field: str  # output key on the parent record
    prefix: str  # column prefix in the joined row
    columns: tuple[str, ...]  # child columns to copy (without prefix)
    key: str = "id"  # child column that identifies the child; NULL = no child
    many: bool = True  # list of children, or a single nested object


class RowAggregator:
    def __init__(
        self,
        columns: Iterable[str],
        nested: Iterable[Nested] = (),
        key: str = "id",
    ):
        self._columns = tuple(columns)
        self._nested = tuple(nested)
        self._key = key

    def aggregate(self, rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        records: dict[Hashable, dict[str, Any]] = {}
        # child keys already collected per (parent, field)
        seen: dict[Hashable, dict[str, set]] = {}

        for row in rows:
            parent_id = row[self._key]
            record = records.get(parent_id)
            if record is None:
                record = {column: row.get(column) for column in self._columns}
                for nested in self._nested:
                    record[nested.field] = [] if nested.many else None
                records[parent_id] = record
                seen[parent_id] = {n.field: set() for n in self._nested if n.many}

            for nested in self._nested:
                child_key = row.get(nested.prefix + nested.key)
                if child_key is None:
                    continue
                if not nested.many:
                    # same value on every row of this parent
                    record[nested.field] = self._project(row, nested)
                    continue
                collected = seen[parent_id][nested.field]
                if child_key in collected:
                    continue
                collected.add(child_key)
                record[nested.field].append(self._project(row, nested))

        return list(records.values())

    @staticmethod
    def _project(row: Mapping[str, Any], nested: Nested) -> dict[str, Any]:
        return {column: row.get(nested.prefix + column) for column in nested.columns}
