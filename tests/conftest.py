"""
Pytest configuration and shared fixtures.

Grids are rebuilt per test: searches mutate cells in place.
"""

import pytest

from gridpath.core.grid import make_grid
from gridpath.core.types import Grid


@pytest.fixture
def open_5x5() -> Grid:
    """5x5 grid without walls, start top-left, finish bottom-right."""
    return make_grid(5, 5, (0, 0), (4, 4))


@pytest.fixture
def center_3x3() -> Grid:
    """3x3 open grid starting in the middle, finish in the bottom-right corner."""
    return make_grid(3, 3, (1, 1), (2, 2))


@pytest.fixture
def enclosed_finish() -> Grid:
    """3x3 grid whose finish (2,2) is cut off by walls at (1,2) and (2,1)."""
    return make_grid(3, 3, (0, 0), (2, 2), walls=[(1, 2), (2, 1)])


@pytest.fixture
def single_cell() -> Grid:
    """1x1 grid where start and finish are the same cell."""
    return make_grid(1, 1, (0, 0), (0, 0))
