"""
SQL INSERT statement builder with multi-row VALUES expansion.
"""

from typing import Sequence

from param_sql.core.parameters import build_placeholders
from param_sql.exceptions import InvalidArgumentError
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


def build_insert_sql(table: str, fields: Sequence[str], row_count: int = 1) -> str:
    """
    Build an INSERT statement for ``row_count`` rows.

    Args:
        table: Table name, emitted verbatim
        fields: Column names; also the placeholder arity of each row
        row_count: Number of VALUES tuples, at least 1

    Returns:
        ``INSERT INTO <table> (<fields>) VALUES (?,...),(?,...)``

    Raises:
        InvalidArgumentError: If ``fields`` is empty or ``row_count`` < 1

    Examples:
        >>> build_insert_sql("test", ["name", "age"], 2)
        'INSERT INTO test (name,age) VALUES (?,?),(?,?)'
    """
    error = None
    if isinstance(fields, str) or not fields:
        error = InvalidArgumentError(
            "insert", "fields", "fields must be a non-empty sequence of column names",
            value=fields,
        )
    elif isinstance(row_count, bool) or not isinstance(row_count, int) or row_count < 1:
        error = InvalidArgumentError(
            "insert", "row_count", f"row_count must be an integer >= 1, got {row_count!r}",
            value=row_count,
        )
    if error is not None:
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error

    row = build_placeholders(len(fields))
    sql = f"INSERT INTO {table} ({','.join(fields)}) VALUES {','.join([row] * row_count)}"
    logger.debug(
        "sql.statement_built",
        statement="insert",
        table=table,
        rows=row_count,
        placeholders=len(fields) * row_count,
    )
    return sql
