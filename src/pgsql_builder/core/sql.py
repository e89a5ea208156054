"""Renderable SQL fragments and the :func:`build` entry point.

A fragment is anything with a ``write_sql(buf, args)`` method.  Fragments write
their text to a shared buffer and bind values through a shared :class:`Args`,
which keeps placeholder numbering consistent across an entire statement no
matter how deeply the fragments are nested.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

from .args import Args

__all__ = [
    "BinaryExpr",
    "FormatString",
    "Ident",
    "Param",
    "Raw",
    "ReturningList",
    "SQLWriter",
    "WhereList",
    "and_",
    "build",
    "or_",
    "sanitize_identifier",
    "to_writer",
    "write_joined",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class SQLWriter(Protocol):
    def write_sql(self, buf: io.StringIO, args: Args) -> None: ...


def sanitize_identifier(parts: Sequence[str]) -> str:
    """Quote each part of a dotted identifier for PostgreSQL.

    NUL bytes are dropped and embedded double quotes are doubled.

    >>> sanitize_identifier(["public", 'we"ird'])
    '"public"."we""ird"'
    """

    quoted = []
    for part in parts:
        cleaned = part.replace("\x00", "").replace('"', '""')
        quoted.append(f'"{cleaned}"')
    return ".".join(quoted)


@dataclass(frozen=True)
class Raw:
    """Literal SQL text, written as is."""

    text: str

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write(self.text)


@dataclass(frozen=True, init=False)
class Ident:
    """A quoted, possibly schema-qualified identifier."""

    parts: Tuple[str, ...]

    def __init__(self, *parts: str) -> None:
        if not parts:
            raise ValueError("Ident requires at least one name")
        object.__setattr__(self, "parts", tuple(parts))

    @classmethod
    def from_path(cls, path: str) -> "Ident":
        """Split a dotted path such as ``public.people`` into an identifier."""

        return cls(*path.split("."))

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write(sanitize_identifier(self.parts))


@dataclass(frozen=True)
class Param:
    """A single bound value."""

    value: Any

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write(str(args.use(self.value)))


@dataclass(frozen=True)
class BinaryExpr:
    """``(left op right)``; always parenthesized so nesting keeps its precedence."""

    left: SQLWriter
    op: str
    right: SQLWriter

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write("(")
        self.left.write_sql(buf, args)
        buf.write(f" {self.op} ")
        self.right.write_sql(buf, args)
        buf.write(")")


@dataclass(frozen=True)
class FormatString:
    """SQL text with ``?`` markers bound to ``args`` at render time."""

    template: str
    args: Tuple[Any, ...] = ()

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        buf.write(args.format(self.template, *self.args))


@dataclass(frozen=True)
class _FragmentList:
    items: Tuple[SQLWriter, ...] = ()

    keyword = ""
    separator = ", "
    wrap_items = False

    def write_sql(self, buf: io.StringIO, args: Args) -> None:
        if not self.items:
            return

        buf.write(f" {self.keyword} ")
        for i, item in enumerate(self.items):
            if i > 0:
                buf.write(self.separator)
            if self.wrap_items:
                buf.write("(")
            item.write_sql(buf, args)
            if self.wrap_items:
                buf.write(")")


@dataclass(frozen=True)
class WhereList(_FragmentList):
    """Predicates ANDed together, each one in its own parentheses."""

    keyword = "where"
    separator = " and "
    wrap_items = True


@dataclass(frozen=True)
class ReturningList(_FragmentList):
    keyword = "returning"


def to_writer(value: str | SQLWriter, *args: Any) -> SQLWriter:
    """Coerce ``value`` into a fragment.

    Strings with arguments become a :class:`FormatString`; plain strings become
    :class:`Raw` so that a literal ``?`` (for instance a jsonb operator) is left
    alone when nothing is bound.
    """

    if isinstance(value, str):
        if args:
            return FormatString(value, tuple(args))
        return Raw(value)
    if args:
        raise ValueError("arguments can only be given together with a format string")
    if not isinstance(value, SQLWriter):
        raise TypeError(f"expected str or SQLWriter, got {type(value).__name__}")
    return value


def _combine(left: Optional[SQLWriter], op: str, right: Optional[SQLWriter]) -> Optional[SQLWriter]:
    if left is None:
        return right
    if right is None:
        return left
    return BinaryExpr(left, op, right)


def and_(left: Optional[SQLWriter], right: Optional[SQLWriter]) -> Optional[SQLWriter]:
    """AND two conditions; a missing side yields the other one unchanged."""

    return _combine(left, "and", right)


def or_(left: Optional[SQLWriter], right: Optional[SQLWriter]) -> Optional[SQLWriter]:
    return _combine(left, "or", right)


def write_joined(buf: io.StringIO, args: Args, items: Iterable[SQLWriter], separator: str = ", ") -> None:
    """Write ``items`` to ``buf`` separated by ``separator``."""

    for i, item in enumerate(items):
        if i > 0:
            buf.write(separator)
        item.write_sql(buf, args)


def build(writer: SQLWriter) -> Tuple[str, List[Any]]:
    """Render ``writer`` against a fresh argument table.

    Returns the SQL text and the values for its placeholders; ``values[i - 1]``
    belongs to ``$i``.
    """

    buf = io.StringIO()
    args = Args()
    writer.write_sql(buf, args)
    sql = buf.getvalue()
    values = args.values()
    logger.debug("built statement with %d bound values: %s", len(values), sql)
    return sql, values
