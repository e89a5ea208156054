"""Public package API."""

from importlib import metadata

from .core import (
    ArgumentCountError,
    Args,
    Assignment,
    BinaryExpr,
    DeleteStatement,
    FormatString,
    Ident,
    InsertStatement,
    Param,
    Placeholder,
    Raw,
    ReturningList,
    RowMap,
    SelectStatement,
    SQLWriter,
    UpdateStatement,
    ValuesStatement,
    WhereList,
    and_,
    build,
    delete,
    distinct,
    distinct_on,
    frame_insert_data,
    from_,
    insert,
    limit,
    offset,
    or_,
    order,
    replace_order,
    replace_select,
    rows_from_frame,
    sanitize_identifier,
    select,
    update,
    values,
    where,
)

__all__ = [
    "build",
    "select",
    "replace_select",
    "distinct",
    "distinct_on",
    "from_",
    "where",
    "order",
    "replace_order",
    "limit",
    "offset",
    "delete",
    "insert",
    "update",
    "values",
    "and_",
    "or_",
    "sanitize_identifier",
    "rows_from_frame",
    "frame_insert_data",
    "Args",
    "ArgumentCountError",
    "Assignment",
    "BinaryExpr",
    "DeleteStatement",
    "FormatString",
    "Ident",
    "InsertStatement",
    "Param",
    "Placeholder",
    "Raw",
    "ReturningList",
    "RowMap",
    "SelectStatement",
    "SQLWriter",
    "UpdateStatement",
    "ValuesStatement",
    "WhereList",
]

try:
    __version__ = metadata.version("pgsql-builder")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
