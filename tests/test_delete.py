from __future__ import annotations

import pgsql_builder as pgsql
from pgsql_builder import FormatString, Ident, build


def test_delete_without_where() -> None:
    assert build(pgsql.delete("people")) == ("delete from people", [])


def test_delete_with_where_and_returning() -> None:
    stmt = pgsql.delete(Ident("people")).where("id = ?", 7).where(FormatString("age > ?", (7,))).returning("id")
    assert build(stmt) == ('delete from "people" where (id = $1) and (age > $1) returning id', [7])


def test_delete_apply_appends_clauses() -> None:
    stmt = pgsql.delete("people").where("id = ?", 1)
    stmt.apply(pgsql.delete("ignored").where("active = ?", False).returning("id"))
    assert build(stmt) == ("delete from people where (id = $1) and (active = $2) returning id", [1, False])
