"""
SQL UPDATE statement builder.
"""

from param_sql.core.clauses import (
    build_assignments,
    build_order_limit,
    build_where,
    join_fragments,
)
from param_sql.core.options import Criteria, OptionsInput, OrderLimitOptions, coerce_options
from param_sql.exceptions import InvalidArgumentError
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


def build_update_sql(
    table: str,
    criteria: Criteria,
    updates: Criteria,
    options: OptionsInput = None,
) -> str:
    """
    Build an UPDATE statement.

    Bind the ``updates`` values first, then the ``criteria`` values; see
    :func:`param_sql.core.parameters.bind_values`.

    Args:
        table: Table name, emitted verbatim
        criteria: WHERE mapping; only the keys are used
        updates: SET mapping; only the keys are used, must not be empty
        options: OrderLimitOptions or mapping with sort, limit, offset

    Returns:
        ``UPDATE <table> SET a=?,b=? WHERE ... [ORDER BY ...] [LIMIT ...]``

    Raises:
        InvalidArgumentError: If ``updates`` is empty or options are malformed

    Examples:
        >>> build_update_sql("test", {}, {"name": "test"})
        'UPDATE test SET name=? WHERE 1'
    """
    if not updates:
        error = InvalidArgumentError(
            "update", "updates", "at least one column must be updated", value=updates
        )
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error

    opts = coerce_options(options, OrderLimitOptions, "update")
    sql = join_fragments(
        [
            f"UPDATE {table} SET {build_assignments(updates)}",
            build_where(criteria),
            build_order_limit(opts.sort, opts.limit, opts.offset),
        ]
    )
    logger.debug(
        "sql.statement_built",
        statement="update",
        table=table,
        placeholders=len(updates) + len(criteria),
    )
    return sql
