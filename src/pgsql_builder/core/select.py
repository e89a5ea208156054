"""Fluent builder for ``SELECT`` statements."""

from __future__ import annotations

import io
from typing import Any

from .args import Args
from .clauses import Accumulating, Replaceable, Singular
from .sql import SQLWriter, WhereList, to_writer, write_joined

__all__ = [
    "SelectStatement",
    "distinct",
    "distinct_on",
    "from_",
    "limit",
    "offset",
    "order",
    "replace_order",
    "replace_select",
    "select",
    "where",
]


def _check_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


class SelectStatement:
    """A ``SELECT`` under construction.

    Every method mutates the statement and returns it, so calls can be chained.
    Text arguments may contain ``?`` markers bound to the extra positional
    arguments; anything implementing ``write_sql`` is accepted as is.
    """

    def __init__(self) -> None:
        self._distinct: Singular[bool] = Singular(False)
        self._distinct_on = Accumulating()
        self._select = Replaceable()
        self._from: Singular[SQLWriter] = Singular()
        self._where = Accumulating()
        self._order = Replaceable()
        self._limit: Singular[int] = Singular()
        self._offset: Singular[int] = Singular()

    def select(self, expr: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._select.append(to_writer(expr, *args))
        return self

    def replace_select(self, expr: str | SQLWriter, *args: Any) -> "SelectStatement":
        """Drop the select list collected so far and start over with ``expr``."""

        self._select.replace(to_writer(expr, *args))
        return self

    def distinct(self, flag: bool = True) -> "SelectStatement":
        self._distinct.set(flag)
        return self

    def distinct_on(self, expr: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._distinct_on.append(to_writer(expr, *args))
        return self

    def from_(self, source: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._from.set(to_writer(source, *args))
        return self

    def where(self, cond: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._where.append(to_writer(cond, *args))
        return self

    def order(self, expr: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._order.append(to_writer(expr, *args))
        return self

    def replace_order(self, expr: str | SQLWriter, *args: Any) -> "SelectStatement":
        self._order.replace(to_writer(expr, *args))
        return self

    def limit(self, n: int) -> "SelectStatement":
        self._limit.set(_check_count(n, "limit"))
        return self

    def offset(self, n: int) -> "SelectStatement":
        self._offset.set(_check_count(n, "offset"))
        return self

    def apply(self, other: "SelectStatement") -> "SelectStatement":
        """Replay the mutations recorded in ``other`` on this statement.

        Accumulated clauses are appended, replaced clauses discard what this
        statement had collected for them, and singular clauses are overwritten
        only when ``other`` set them.
        """

        other._distinct.merge_into(self._distinct)
        other._distinct_on.merge_into(self._distinct_on)
        other._select.merge_into(self._select)
        other._from.merge_into(self._from)
        other._where.merge_into(self._where)
        other._order.merge_into(self._order)
        other._limit.merge_into(self._limit)
        other._offset.merge_into(self._offset)
        return self

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write("select")

        if self._distinct_on:
            buf.write(" distinct on (")
            write_joined(buf, args, self._distinct_on.items)
            buf.write(")")
        elif self._distinct.value:
            buf.write(" distinct")

        buf.write(" ")
        if self._select:
            write_joined(buf, args, self._select.items)
        else:
            buf.write("*")

        if self._from.value is not None:
            buf.write(" from ")
            self._from.value.write_sql(buf, args)

        WhereList(tuple(self._where.items)).write_sql(buf, args)

        if self._order:
            buf.write(" order by ")
            write_joined(buf, args, self._order.items)

        if self._limit.value is not None:
            buf.write(f" limit {self._limit.value}")

        if self._offset.value is not None:
            buf.write(f" offset {self._offset.value}")


def select(expr: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().select(expr, *args)


def replace_select(expr: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().replace_select(expr, *args)


def distinct(flag: bool = True) -> SelectStatement:
    return SelectStatement().distinct(flag)


def distinct_on(expr: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().distinct_on(expr, *args)


def from_(source: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().from_(source, *args)


def where(cond: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().where(cond, *args)


def order(expr: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().order(expr, *args)


def replace_order(expr: str | SQLWriter, *args: Any) -> SelectStatement:
    return SelectStatement().replace_order(expr, *args)


def limit(n: int) -> SelectStatement:
    return SelectStatement().limit(n)


def offset(n: int) -> SelectStatement:
    return SelectStatement().offset(n)
