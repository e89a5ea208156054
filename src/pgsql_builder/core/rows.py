"""Helpers that turn a bag of column values into insert and update data.

Mappings are iterated in sorted key order so the generated SQL is stable
regardless of how the data was assembled.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pandas as pd

from .sql import Param, Raw
from .update import Assignment
from .values import ValuesStatement

__all__ = ["RowMap", "frame_insert_data", "rows_from_frame"]


class RowMap(Dict[str, Any]):
    """Column name to value mapping for a single row."""

    def sorted_keys(self) -> List[str]:
        return sorted(self)

    def insert_data(self) -> Tuple[List[str], ValuesStatement]:
        """Return the column names and a one-row ``VALUES`` list."""

        keys = self.sorted_keys()
        vs = ValuesStatement()
        vs.row(*(self[k] for k in keys))
        return keys, vs

    def update_data(self) -> List[Assignment]:
        return [Assignment(Raw(k), Param(self[k])) for k in self.sorted_keys()]


def _missing_to_none(value: Any) -> Any:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def rows_from_frame(df: pd.DataFrame) -> List[RowMap]:
    """Return one :class:`RowMap` per row of ``df``.

    Missing values (``NaN``, ``NaT``, ``None``, ``pd.NA``) become ``None`` so
    they are sent as SQL ``NULL``.
    """

    return [
        RowMap({str(k): _missing_to_none(v) for k, v in record.items()})
        for record in df.to_dict(orient="records")
    ]


def frame_insert_data(df: pd.DataFrame) -> Tuple[List[str], ValuesStatement]:
    """Return sorted column names and a ``VALUES`` list with one row per frame row."""

    if df.empty:
        raise ValueError("cannot build insert data from an empty DataFrame")

    columns = sorted(str(c) for c in df.columns)
    vs = ValuesStatement()
    for row in rows_from_frame(df):
        vs.row(*(row[c] for c in columns))
    return columns, vs
