"""
param_sql - parameterized SQL statement assembly.

Builds COUNT, SELECT, INSERT, UPDATE and DELETE statements with positional
``?`` placeholders from ordered column mappings. Values are never embedded in
the SQL text; bind them in the order the placeholders appear.
"""

__version__ = "0.1.0"

from .core import (
    FindOptions,
    OrderLimitOptions,
    SortDirection,
    bind_values,
    build_order_limit,
    build_placeholders,
    build_where,
    flatten_rows,
)
from .exceptions import InvalidArgumentError, SQLBuildError
from .operations import (
    BoundStatement,
    build_count_sql,
    build_delete_sql,
    build_find_sql,
    build_insert_sql,
    build_update_sql,
    prepare_count,
    prepare_delete,
    prepare_find,
    prepare_insert,
    prepare_update,
)

__all__ = [
    "build_where",
    "build_order_limit",
    "build_count_sql",
    "build_find_sql",
    "build_insert_sql",
    "build_update_sql",
    "build_delete_sql",
    "BoundStatement",
    "prepare_count",
    "prepare_find",
    "prepare_insert",
    "prepare_update",
    "prepare_delete",
    "bind_values",
    "build_placeholders",
    "flatten_rows",
    "FindOptions",
    "OrderLimitOptions",
    "SortDirection",
    "SQLBuildError",
    "InvalidArgumentError",
]
