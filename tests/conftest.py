"""Pytest configuration and fixtures."""

import pytest

from maze_search.config import get_settings
from maze_search.core.maze_grid import (
    CORRIDOR_MAZE,
    DISCONNECTED_MAZE,
    TUTORIAL_MAZE,
    MazeGrid,
)
from tests.helpers import OPEN_MAZE


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def corridor_grid() -> MazeGrid:
    return MazeGrid.from_text(CORRIDOR_MAZE)


@pytest.fixture
def open_grid() -> MazeGrid:
    return MazeGrid.from_text(OPEN_MAZE)


@pytest.fixture
def tutorial_grid() -> MazeGrid:
    return MazeGrid.from_text(TUTORIAL_MAZE)


@pytest.fixture
def disconnected_grid() -> MazeGrid:
    return MazeGrid.from_text(DISCONNECTED_MAZE)
