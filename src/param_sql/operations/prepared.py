"""
Prepared statements: SQL text paired with its bind values.

Each ``prepare_*`` function returns the same SQL as the matching
``build_*_sql`` function together with the values in placeholder order, so
the result can be handed straight to a DB-API cursor::

    statement = prepare_find("users", {"name": "john"}, {"limit": 1})
    cursor.execute(*statement)
"""

from typing import Any, Mapping, NamedTuple, Sequence, Tuple

from param_sql.core.options import Criteria, OptionsInput
from param_sql.core.parameters import bind_values, flatten_rows
from param_sql.exceptions import InvalidArgumentError
from param_sql.operations.delete import build_delete_sql
from param_sql.operations.insert import build_insert_sql
from param_sql.operations.select import build_count_sql, build_find_sql
from param_sql.operations.update import build_update_sql
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


class BoundStatement(NamedTuple):
    """SQL text and the values to bind to its ``?`` placeholders."""

    sql: str
    params: Tuple[Any, ...]


def prepare_count(table: str, criteria: Criteria) -> BoundStatement:
    return BoundStatement(build_count_sql(table, criteria), tuple(bind_values(criteria)))


def prepare_find(
    table: str, criteria: Criteria, options: OptionsInput = None
) -> BoundStatement:
    return BoundStatement(
        build_find_sql(table, criteria, options), tuple(bind_values(criteria))
    )


def prepare_insert(table: str, rows: Sequence[Mapping[str, Any]]) -> BoundStatement:
    """
    Prepare a multi-row INSERT from row mappings.

    Columns are taken from the first row's keys; every row must carry the
    same set of columns.

    Raises:
        InvalidArgumentError: If ``rows`` is empty or the rows disagree on columns
    """
    if not rows:
        error = InvalidArgumentError("insert", "rows", "at least one row is required")
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error

    fields = list(rows[0])
    expected = set(fields)
    for index, row in enumerate(rows[1:], start=1):
        if set(row) != expected:
            error = InvalidArgumentError(
                "insert",
                "rows",
                f"row {index} columns {sorted(row)} differ from {sorted(expected)}",
                value=row,
            )
            logger.warning("sql.invalid_argument", **error.to_dict())
            raise error

    return BoundStatement(
        build_insert_sql(table, fields, len(rows)), tuple(flatten_rows(fields, rows))
    )


def prepare_update(
    table: str,
    criteria: Criteria,
    updates: Criteria,
    options: OptionsInput = None,
) -> BoundStatement:
    """Prepare an UPDATE; params are the update values, then the criteria values."""
    return BoundStatement(
        build_update_sql(table, criteria, updates, options),
        tuple(bind_values(updates, criteria)),
    )


def prepare_delete(
    table: str, criteria: Criteria, options: OptionsInput = None
) -> BoundStatement:
    return BoundStatement(
        build_delete_sql(table, criteria, options), tuple(bind_values(criteria))
    )
