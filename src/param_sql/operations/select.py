"""
SELECT statement builders: row counts and finds.
"""

from param_sql.core.clauses import (
    build_order_limit,
    build_projection,
    build_where,
    join_fragments,
)
from param_sql.core.options import Criteria, FindOptions, OptionsInput, coerce_options
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


def build_count_sql(table: str, criteria: Criteria) -> str:
    """
    Build a row count statement.

    Args:
        table: Table name, emitted verbatim
        criteria: Column to value mapping; only the keys are used

    Returns:
        ``SELECT COUNT(*) AS counter FROM <table> WHERE ...``

    Examples:
        >>> build_count_sql("test", {"foo": "bar", "test": "test"})
        'SELECT COUNT(*) AS counter FROM test WHERE foo=? AND test=?'
    """
    sql = join_fragments(
        [f"SELECT COUNT(*) AS counter FROM {table}", build_where(criteria)]
    )
    logger.debug(
        "sql.statement_built", statement="count", table=table, placeholders=len(criteria)
    )
    return sql


def build_find_sql(
    table: str, criteria: Criteria, options: OptionsInput = None
) -> str:
    """
    Build a SELECT statement.

    Args:
        table: Table name, emitted verbatim
        criteria: Column to value mapping; only the keys are used
        options: FindOptions or mapping with projections, sort, limit, offset

    Returns:
        ``SELECT <projection> FROM <table> WHERE ... [ORDER BY ...] [LIMIT ...]``

    Raises:
        InvalidArgumentError: If options are malformed

    Examples:
        >>> build_find_sql("test", {"foo": "bar"}, {"projections": ["name", "age"], "limit": 5})
        'SELECT name,age FROM test WHERE foo=? LIMIT 5'
    """
    opts = coerce_options(options, FindOptions, "find")
    sql = join_fragments(
        [
            f"SELECT {build_projection(opts.projections)} FROM {table}",
            build_where(criteria),
            build_order_limit(opts.sort, opts.limit, opts.offset),
        ]
    )
    logger.debug(
        "sql.statement_built", statement="find", table=table, placeholders=len(criteria)
    )
    return sql
