"""Clause fragments, option records and bind-value helpers."""

from .clauses import (
    build_assignments,
    build_order_by,
    build_order_limit,
    build_projection,
    build_where,
    join_fragments,
)
from .options import FindOptions, OrderLimitOptions, SortDirection, coerce_options
from .parameters import bind_values, build_placeholders, flatten_rows

__all__ = [
    "build_where",
    "build_order_by",
    "build_order_limit",
    "build_assignments",
    "build_projection",
    "join_fragments",
    "FindOptions",
    "OrderLimitOptions",
    "SortDirection",
    "coerce_options",
    "bind_values",
    "build_placeholders",
    "flatten_rows",
]
