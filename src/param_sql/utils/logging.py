"""Structured logging using structlog.

Loggers returned by :func:`get_logger` wrap the stdlib logger of the same
name, so records flow into whatever handlers the host application installed.
Importing this module installs no handlers and leaves structlog's global
configuration alone.

Applications (and tests) that want output from the library alone call
:func:`configure_logging`, which sets up:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Dual output (stderr stream + optional file logging)

Configuration is loaded from param_sql.config.settings:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO
- PARAM_SQL_LOG_TO_FILE: Enable file logging. Default: disabled
- PARAM_SQL_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from param_sql.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("sql.statement_built", statement="find", table="users")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from param_sql.config import get_settings

ROOT_LOGGER_NAME = "param_sql"

PROCESSORS: List[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def _get_log_level() -> int:
    """Get log level from settings.

    Falls back to the LOG_LEVEL environment variable when settings cannot be
    loaded (for example a malformed .env file).
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except Exception:
        return False


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except Exception:
        log_dir = Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: param-sql-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"param-sql-{date_str}.log"


def configure_logging(level: Optional[int] = None) -> List[logging.Handler]:
    """Attach stream (and optionally file) handlers to the ``param_sql`` logger.

    Only the library's own logger tree is touched; the root logger is left to
    the host application. Records still propagate to root handlers.

    Args:
        level: Logging level; defaults to LOG_LEVEL from settings

    Returns:
        The handlers that were added, so callers can remove them again
    """
    if level is None:
        level = _get_log_level()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if _should_log_to_file():
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(_get_log_file_path()),
                when="midnight",
                interval=1,
                backupCount=30,  # 30-day retention
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    return handlers


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger over the stdlib logger ``name``.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A BoundLogger rendering JSON into the stdlib logging tree
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def bind_context(**kwargs: Any) -> Any:
    """Create a library logger with bound context fields.

    Example:
        >>> logger = bind_context(statement="insert", table="users")
        >>> logger.debug("sql.statement_built", placeholders=4)
    """
    return get_logger(ROOT_LOGGER_NAME).bind(**kwargs)
