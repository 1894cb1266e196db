"""
Option records accepted by the statement builders.

Callers may pass an options instance, a plain mapping with the same field
names, or None. Mappings are validated into the frozen pydantic models below
so unknown keys and negative limits are reported instead of silently ignored.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from param_sql.exceptions import InvalidArgumentError
from param_sql.utils.logging import get_logger

logger = get_logger(__name__)


class SortDirection(str, Enum):
    """Sort direction tokens understood by ORDER BY."""

    ASC = "ASC"
    DESC = "DESC"


Criteria = Mapping[str, Any]
Sort = Mapping[str, Union[str, SortDirection]]


class OrderLimitOptions(BaseModel):
    """ORDER BY / LIMIT / OFFSET modifiers shared by find, update and delete."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sort: Optional[Dict[str, str]] = Field(
        default=None,
        description="Column to direction mapping, emitted in iteration order",
    )
    limit: Optional[int] = Field(default=None, ge=0, strict=True)
    offset: Optional[int] = Field(
        default=None,
        ge=0,
        strict=True,
        description="Only emitted when limit is also set",
    )


class FindOptions(OrderLimitOptions):
    """Options for SELECT statements, adding the projected columns."""

    projections: Optional[List[str]] = Field(
        default=None,
        description="Selected columns; empty or missing selects *",
    )


OptionsT = TypeVar("OptionsT", bound=OrderLimitOptions)
OptionsInput = Union[OrderLimitOptions, Mapping[str, Any], None]


def coerce_options(
    options: OptionsInput, model: Type[OptionsT], statement: str
) -> OptionsT:
    """
    Normalize an options argument into ``model``.

    Args:
        options: None, an options instance or a mapping of option fields
        model: Target options class
        statement: Statement kind, used for error context

    Returns:
        An instance of exactly ``model``

    Raises:
        InvalidArgumentError: If the options hold unknown keys or bad values
    """
    if options is None:
        return model()
    if type(options) is model:
        return options
    if isinstance(options, OrderLimitOptions):
        # re-validate so fields the target model lacks (projections) are rejected
        options = options.model_dump(exclude_unset=True, exclude_none=True)
    if not isinstance(options, Mapping):
        error = InvalidArgumentError(
            statement,
            "options",
            f"options must be a mapping or {model.__name__}, "
            f"got {type(options).__name__}",
            value=options,
        )
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error
    try:
        return model.model_validate(dict(options))
    except ValidationError as exc:
        error = InvalidArgumentError(
            statement, "options", f"invalid options: {exc}", value=dict(options)
        )
        logger.warning("sql.invalid_argument", **error.to_dict())
        raise error from exc
