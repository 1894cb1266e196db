"""
Placeholder and bind-value utilities.

The builders never embed values in SQL text. These helpers produce the
``?`` tuples used by INSERT and collect bind values in the exact order the
placeholders are emitted.
"""

from typing import Any, List, Mapping, Sequence

from param_sql.exceptions import InvalidArgumentError
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


def build_placeholders(arity: int) -> str:
    """
    Build a parenthesized placeholder tuple.

    Examples:
        >>> build_placeholders(3)
        '(?,?,?)'
    """
    return "(" + ",".join("?" * arity) + ")"


def bind_values(*mappings: Mapping[str, Any]) -> List[Any]:
    """
    Collect bind values from mappings in placeholder order.

    Values of each mapping are taken in iteration order, and the mappings are
    concatenated in the order given. For UPDATE pass ``updates`` first, then
    ``criteria``.

    Examples:
        >>> bind_values({"name": "john"}, {"id": 7, "age": 30})
        ['john', 7, 30]
    """
    values: List[Any] = []
    for mapping in mappings:
        values.extend(mapping.values())
    return values


def flatten_rows(
    fields: Sequence[str], rows: Sequence[Mapping[str, Any]]
) -> List[Any]:
    """
    Flatten row mappings into a single bind list for a multi-row INSERT.

    Args:
        fields: Column order used by the INSERT statement
        rows: Row mappings keyed by column name

    Returns:
        Values of every row read in ``fields`` order, rows concatenated

    Raises:
        InvalidArgumentError: If a row is missing one of ``fields``

    Examples:
        >>> flatten_rows(["name", "age"], [{"age": 3, "name": "a"}, {"name": "b", "age": 4}])
        ['a', 3, 'b', 4]
    """
    values: List[Any] = []
    for index, row in enumerate(rows):
        missing = [field for field in fields if field not in row]
        if missing:
            error = InvalidArgumentError(
                "insert",
                "rows",
                f"row {index} is missing columns: {', '.join(missing)}",
                value=row,
            )
            logger.warning("sql.invalid_argument", row_index=index, **error.to_dict())
            raise error
        values.extend(row[field] for field in fields)
    return values
