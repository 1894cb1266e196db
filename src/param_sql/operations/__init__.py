"""Statement builders for COUNT, SELECT, INSERT, UPDATE and DELETE."""

from .delete import build_delete_sql
from .insert import build_insert_sql
from .prepared import (
    BoundStatement,
    prepare_count,
    prepare_delete,
    prepare_find,
    prepare_insert,
    prepare_update,
)
from .select import build_count_sql, build_find_sql
from .update import build_update_sql

__all__ = [
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
]
