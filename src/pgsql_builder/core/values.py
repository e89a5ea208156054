"""``VALUES`` lists used as the row source of an ``INSERT``."""

from __future__ import annotations

import io
from typing import Any, List, Tuple

from .args import Args
from .sql import Param, SQLWriter, write_joined

__all__ = ["ValuesStatement", "values"]


def _as_writer(value: Any) -> SQLWriter:
    if isinstance(value, SQLWriter):
        return value
    return Param(value)


class ValuesStatement:
    """One or more parenthesized rows; plain values are bound as parameters."""

    def __init__(self) -> None:
        self._rows: List[Tuple[SQLWriter, ...]] = []

    def row(self, *values: Any) -> "ValuesStatement":
        if not values:
            raise ValueError("a values row needs at least one value")
        if self._rows and len(values) != len(self._rows[0]):
            raise ValueError(
                f"row has {len(values)} values but previous rows have {len(self._rows[0])}"
            )
        self._rows.append(tuple(_as_writer(value) for value in values))
        return self

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        if not self._rows:
            raise ValueError("values requires at least one row")

        buf.write("values ")
        for i, row in enumerate(self._rows):
            if i > 0:
                buf.write(", ")
            buf.write("(")
            write_joined(buf, args, row)
            buf.write(")")


def values() -> ValuesStatement:
    return ValuesStatement()
