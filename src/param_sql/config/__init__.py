"""Configuration management for param_sql.

Usage:
    >>> from param_sql.config import get_settings
    >>> settings = get_settings()
    >>> settings.strict_sort_direction
    False
"""

from param_sql.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
