"""Builder for ``INSERT`` statements."""

from __future__ import annotations

import io
from typing import Any, Dict, List, Optional

import pandas as pd

from .args import Args
from .clauses import Accumulating
from .rows import RowMap, frame_insert_data
from .sql import ReturningList, SQLWriter, to_writer, write_joined
from .values import ValuesStatement

__all__ = ["InsertStatement", "insert"]


class InsertStatement:
    """An ``INSERT`` with an optional column list and a ``VALUES`` or ``SELECT`` source."""

    def __init__(self, table: str | SQLWriter) -> None:
        self._table = to_writer(table)
        self._columns = Accumulating()
        self._source: Optional[SQLWriter] = None
        self._on_conflict: Optional[SQLWriter] = None
        self._returning = Accumulating()

    def columns(self, *names: str | SQLWriter) -> "InsertStatement":
        for name in names:
            self._columns.append(to_writer(name))
        return self

    def values(self, source: SQLWriter) -> "InsertStatement":
        """Use ``source`` (a ``ValuesStatement`` or a ``SelectStatement``) as the rows."""

        self._source = to_writer(source)
        return self

    def data(self, row: Dict[str, Any]) -> "InsertStatement":
        """Insert one row; replaces any column list and source set earlier."""

        columns, vs = RowMap(row).insert_data()
        return self._set_rows(columns, vs)

    def frame(self, df: pd.DataFrame) -> "InsertStatement":
        """Insert every row of ``df``, with its columns in sorted order.

        Like :meth:`data`, this replaces any column list and source set earlier.
        """

        columns, vs = frame_insert_data(df)
        return self._set_rows(columns, vs)

    def _set_rows(self, columns: List[str], vs: ValuesStatement) -> "InsertStatement":
        self._columns = Accumulating()
        return self.columns(*columns).values(vs)

    def on_conflict(self, action: str | SQLWriter, *args: Any) -> "InsertStatement":
        """Set the conflict clause, e.g. ``on_conflict("(id) do nothing")``."""

        self._on_conflict = to_writer(action, *args)
        return self

    def returning(self, expr: str | SQLWriter, *args: Any) -> "InsertStatement":
        self._returning.append(to_writer(expr, *args))
        return self

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write("insert into ")
        self._table.write_sql(buf, args)

        if self._columns:
            buf.write(" (")
            write_joined(buf, args, self._columns.items)
            buf.write(")")

        if self._source is not None:
            buf.write(" ")
            self._source.write_sql(buf, args)
        else:
            buf.write(" default values")

        if self._on_conflict is not None:
            buf.write(" on conflict ")
            self._on_conflict.write_sql(buf, args)

        ReturningList(tuple(self._returning.items)).write_sql(buf, args)


def insert(table: str | SQLWriter) -> InsertStatement:
    return InsertStatement(table)
