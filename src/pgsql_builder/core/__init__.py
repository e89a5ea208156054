from .args import ArgumentCountError, Args, Placeholder
from .delete import DeleteStatement, delete
from .insert import InsertStatement, insert
from .rows import RowMap, frame_insert_data, rows_from_frame
from .select import (
    SelectStatement,
    distinct,
    distinct_on,
    from_,
    limit,
    offset,
    order,
    replace_order,
    replace_select,
    select,
    where,
)
from .sql import (
    BinaryExpr,
    FormatString,
    Ident,
    Param,
    Raw,
    ReturningList,
    SQLWriter,
    WhereList,
    and_,
    build,
    or_,
    sanitize_identifier,
)
from .update import Assignment, UpdateStatement, update
from .values import ValuesStatement, values

__all__ = [
    "ArgumentCountError",
    "Args",
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
    "SQLWriter",
    "SelectStatement",
    "UpdateStatement",
    "ValuesStatement",
    "WhereList",
    "and_",
    "build",
    "delete",
    "distinct",
    "distinct_on",
    "frame_insert_data",
    "from_",
    "insert",
    "limit",
    "offset",
    "or_",
    "order",
    "replace_order",
    "replace_select",
    "rows_from_frame",
    "sanitize_identifier",
    "select",
    "update",
    "values",
    "where",
]
