"""
Clause fragment generators shared by every statement builder.

A fragment is either a complete clause (``WHERE ...``, ``ORDER BY ...``) or
the empty string. Statement builders join the non-empty fragments with a
single space, so placeholder order always follows mapping iteration order.
"""

from typing import Iterable, Optional, Sequence, Union

from pydantic import ValidationError

from param_sql.config import get_settings
from param_sql.core.options import Criteria, Sort, SortDirection
from param_sql.exceptions import InvalidArgumentError
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)

_DIRECTIONS = frozenset(direction.value for direction in SortDirection)


def build_where(criteria: Criteria) -> str:
    """
    Build an equality conjunction over the criteria keys.

    Examples:
        >>> build_where({"foo": "bar", "test": "test"})
        'WHERE foo=? AND test=?'
        >>> build_where({})
        'WHERE 1'
    """
    if not criteria:
        return "WHERE 1"
    return "WHERE " + " AND ".join(f"{column}=?" for column in criteria)


def build_assignments(updates: Criteria) -> str:
    """Build the ``col=?,col=?`` list of an UPDATE ... SET clause."""
    return ",".join(f"{column}=?" for column in updates)


def build_projection(projections: Optional[Sequence[str]]) -> str:
    if not projections:
        return "*"
    return ",".join(projections)


def _strict_sort_direction() -> bool:
    """Read the strict sort flag; unreadable settings fall back to trusting callers."""
    try:
        return get_settings().strict_sort_direction
    except ValidationError as exc:
        logger.warning(
            "sql.settings_unavailable",
            setting="strict_sort_direction",
            errors=exc.error_count(),
        )
        return False


def _direction_token(
    column: str, direction: Union[str, SortDirection], strict: bool
) -> str:
    token = direction.value if isinstance(direction, SortDirection) else direction
    if strict and str(token).upper() not in _DIRECTIONS:
        error = InvalidArgumentError(
            "order_by",
            "sort",
            f"unsupported sort direction {token!r} for column {column!r}",
            value=token,
        )
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error
    return token


def build_order_by(sort: Optional[Sort]) -> str:
    """
    Build ``ORDER BY col DIR,col DIR`` or an empty fragment.

    Directions are emitted as given; enum members render as their value.
    """
    if not sort:
        return ""
    strict = _strict_sort_direction()
    return "ORDER BY " + ",".join(
        f"{column} {_direction_token(column, direction, strict)}"
        for column, direction in sort.items()
    )


def build_order_limit(
    sort: Optional[Sort] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> str:
    """
    Build the ORDER BY / LIMIT / OFFSET suffix.

    Each piece is emitted only when present, always in that order. OFFSET is
    emitted only together with LIMIT; an offset without a limit is dropped.

    Examples:
        >>> build_order_limit({"name": "ASC", "age": "DESC"}, 5, 10)
        'ORDER BY name ASC,age DESC LIMIT 5 OFFSET 10'
        >>> build_order_limit(offset=10)
        ''
    """
    fragments = [build_order_by(sort)]
    if limit is not None:
        fragments.append(f"LIMIT {limit}")
        if offset is not None:
            fragments.append(f"OFFSET {offset}")
    elif offset is not None:
        logger.warning("sql.offset_dropped", offset=offset, reason="no limit given")
    return join_fragments(fragments)


def join_fragments(fragments: Iterable[str]) -> str:
    """Join non-empty fragments with single spaces."""
    return " ".join(fragment for fragment in fragments if fragment)
