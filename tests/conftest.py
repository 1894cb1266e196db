"""Shared pytest configuration for param_sql tests."""

from __future__ import annotations

import pytest

from param_sql.config import get_settings

SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "PARAM_SQL_STRICT_SORT_DIRECTION",
    "PARAM_SQL_LOG_TO_FILE",
    "PARAM_SQL_LOG_FILE_DIR",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default settings, unaffected by the host env."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_sort(monkeypatch: pytest.MonkeyPatch):
    """Enable the ASC/DESC sort direction check."""
    monkeypatch.setenv("PARAM_SQL_STRICT_SORT_DIRECTION", "true")
    get_settings.cache_clear()
    return get_settings()
