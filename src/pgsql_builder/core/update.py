"""Builder for ``UPDATE`` statements."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Dict

from .args import Args
from .clauses import Accumulating
from .sql import Param, ReturningList, SQLWriter, WhereList, to_writer, write_joined

__all__ = ["Assignment", "UpdateStatement", "update"]


@dataclass(frozen=True)
class Assignment:
    """``left = right`` inside a ``SET`` list."""

    left: SQLWriter
    right: SQLWriter

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        self.left.write_sql(buf, args)
        buf.write(" = ")
        self.right.write_sql(buf, args)


class UpdateStatement:
    def __init__(self, table: str | SQLWriter) -> None:
        self._table = to_writer(table)
        self._set = Accumulating()
        self._where = Accumulating()
        self._returning = Accumulating()

    def set(self, column: str | SQLWriter, value: Any) -> "UpdateStatement":
        """Assign ``value`` to ``column``; plain values are bound as parameters."""

        right = value if isinstance(value, SQLWriter) else Param(value)
        self._set.append(Assignment(to_writer(column), right))
        return self

    def set_expr(self, column: str | SQLWriter, expr: str, *args: Any) -> "UpdateStatement":
        """Assign a SQL expression, e.g. ``set_expr("hits", "hits + ?", 1)``."""

        self._set.append(Assignment(to_writer(column), to_writer(expr, *args)))
        return self

    def data(self, row: Dict[str, Any]) -> "UpdateStatement":
        """Assign every column of ``row``, in sorted column order."""

        from .rows import RowMap

        for assignment in RowMap(row).update_data():
            self._set.append(assignment)
        return self

    def where(self, cond: str | SQLWriter, *args: Any) -> "UpdateStatement":
        self._where.append(to_writer(cond, *args))
        return self

    def returning(self, expr: str | SQLWriter, *args: Any) -> "UpdateStatement":
        self._returning.append(to_writer(expr, *args))
        return self

    def apply(self, other: "UpdateStatement") -> "UpdateStatement":
        other._set.merge_into(self._set)
        other._where.merge_into(self._where)
        other._returning.merge_into(self._returning)
        return self

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        if not self._set:
            raise ValueError("update requires at least one assignment")

        buf.write("update ")
        self._table.write_sql(buf, args)
        buf.write(" set ")
        write_joined(buf, args, self._set.items)
        WhereList(tuple(self._where.items)).write_sql(buf, args)
        ReturningList(tuple(self._returning.items)).write_sql(buf, args)


def update(table: str | SQLWriter) -> UpdateStatement:
    return UpdateStatement(table)
