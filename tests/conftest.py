"""
Pytest configuration and shared fixtures.
"""

import pytest

from config.settings import Settings, get_settings
from controllers.shopping_controller import ShoppingController
from services.row_adapter import RowAdapter


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """
    Start every test from default settings.

    Yields after clearing both the cached Settings instance and any
    environment overrides a developer may have exported.
    """
    for name in ("APP_TITLE", "PAGE_ICON", "CLEAR_INPUT_AFTER_ADD", "LIST_HEIGHT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def adapter():
    """An empty row adapter."""
    return RowAdapter()


@pytest.fixture
def state():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture
def controller(state):
    """Controller with default settings over a plain dict state."""
    return ShoppingController(state=state, settings=Settings(_env_file=None))
