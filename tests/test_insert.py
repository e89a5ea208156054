from __future__ import annotations

import pandas as pd
import pytest

import pgsql_builder as pgsql
from pgsql_builder import Ident, Raw, RowMap, build


def test_values_rows() -> None:
    vs = pgsql.values().row(1, "a").row(2, "a")
    assert build(vs) == ("values ($1, $2), ($3, $2)", [1, "a", 2])


def test_values_row_width_must_match() -> None:
    vs = pgsql.values().row(1, 2)
    with pytest.raises(ValueError, match="previous rows have 2"):
        vs.row(3)


def test_values_without_rows_is_rejected() -> None:
    with pytest.raises(ValueError, match="at least one row"):
        build(pgsql.values())


def test_insert_values() -> None:
    stmt = pgsql.insert("people").columns("name", "created_at").values(pgsql.values().row("Jack", Raw("now()")))
    assert build(stmt) == ("insert into people (name, created_at) values ($1, now())", ["Jack"])


def test_insert_data_from_row_map() -> None:
    stmt = pgsql.insert(Ident("people")).data(RowMap(name="Jack", age=30)).returning("id")
    assert build(stmt) == ('insert into "people" (age, name) values ($1, $2) returning id', [30, "Jack"])


def test_insert_data_accepts_plain_dict() -> None:
    stmt = pgsql.insert("people").data({"b": 2, "a": 1})
    assert build(stmt) == ("insert into people (a, b) values ($1, $2)", [1, 2])


def test_insert_from_select() -> None:
    source = pgsql.select("name").from_("staging").where("batch = ?", 4)
    stmt = pgsql.insert("people").columns("name").values(source)
    assert build(stmt) == ("insert into people (name) select name from staging where (batch = $1)", [4])


def test_insert_default_values_and_on_conflict() -> None:
    stmt = pgsql.insert("counters").on_conflict("(id) do update set n = counters.n + ?", 1)
    assert build(stmt) == ("insert into counters default values on conflict (id) do update set n = counters.n + $1", [1])


def test_insert_frame() -> None:
    df = pd.DataFrame({"name": ["Jack", "Jill"], "age": [30, None]})
    stmt = pgsql.insert("people").frame(df)
    sql, args = build(stmt)
    assert sql == "insert into people (age, name) values ($1, $2), ($3, $4)"
    assert args == [30.0, "Jack", None, "Jill"]


def test_insert_data_replaces_earlier_rows() -> None:
    stmt = pgsql.insert("t").data(RowMap(a=1, b=2)).data(RowMap(a=3, b=4))
    assert build(stmt) == ("insert into t (a, b) values ($1, $2)", [3, 4])


def test_insert_data_replaces_explicit_columns() -> None:
    stmt = pgsql.insert("t").columns("x", "y", "z").data({"a": 1})
    assert build(stmt) == ("insert into t (a) values ($1)", [1])


def test_insert_frame_replaces_earlier_data() -> None:
    df = pd.DataFrame({"b": ["x"], "a": [1]})
    stmt = pgsql.insert("t").data({"c": 9}).frame(df)
    assert build(stmt) == ("insert into t (a, b) values ($1, $2)", [1, "x"])
