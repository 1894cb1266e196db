"""
SQL DELETE statement builder.
"""

from param_sql.core.clauses import build_order_limit, build_where, join_fragments
from param_sql.core.options import Criteria, OptionsInput, OrderLimitOptions, coerce_options
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


def build_delete_sql(
    table: str, criteria: Criteria, options: OptionsInput = None
) -> str:
    """
    Build a DELETE statement.

    Examples:
        >>> build_delete_sql("test", {"name": "john"}, {"sort": {"name": "ASC"}, "limit": 2})
        'DELETE FROM test WHERE name=? ORDER BY name ASC LIMIT 2'
    """
    opts = coerce_options(options, OrderLimitOptions, "delete")
    sql = join_fragments(
        [
            f"DELETE FROM {table}",
            build_where(criteria),
            build_order_limit(opts.sort, opts.limit, opts.offset),
        ]
    )
    logger.debug(
        "sql.statement_built", statement="delete", table=table, placeholders=len(criteria)
    )
    return sql
