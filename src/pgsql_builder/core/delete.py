"""Builder for ``DELETE`` statements."""

from __future__ import annotations

import io
from typing import Any

from .args import Args
from .clauses import Accumulating
from .sql import ReturningList, SQLWriter, WhereList, to_writer

__all__ = ["DeleteStatement", "delete"]


class DeleteStatement:
    def __init__(self, table: str | SQLWriter) -> None:
        self._table = to_writer(table)
        self._where = Accumulating()
        self._returning = Accumulating()

    def where(self, cond: str | SQLWriter, *args: Any) -> "DeleteStatement":
        self._where.append(to_writer(cond, *args))
        return self

    def returning(self, expr: str | SQLWriter, *args: Any) -> "DeleteStatement":
        self._returning.append(to_writer(expr, *args))
        return self

    def apply(self, other: "DeleteStatement") -> "DeleteStatement":
        """Append ``other``'s predicates and returning list to this statement."""

        other._where.merge_into(self._where)
        other._returning.merge_into(self._returning)
        return self

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write("delete from ")
        self._table.write_sql(buf, args)
        WhereList(tuple(self._where.items)).write_sql(buf, args)
        ReturningList(tuple(self._returning.items)).write_sql(buf, args)


def delete(table: str | SQLWriter) -> DeleteStatement:
    return DeleteStatement(table)
