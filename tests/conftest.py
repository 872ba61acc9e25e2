"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from gridpath.grid import Point, cell_key


@pytest.fixture
def open_grid() -> tuple[Point, Point, int, int, frozenset[str]]:
    """A 5x5 grid with no walls, corner to corner."""
    return Point(0, 0), Point(4, 4), 5, 5, frozenset()


@pytest.fixture
def partitioned_grid() -> tuple[Point, Point, int, int, frozenset[str]]:
    """A 5x5 grid split in two by a full wall column at x=2."""
    walls = frozenset(cell_key(2, y) for y in range(5))
    return Point(0, 0), Point(4, 4), 5, 5, walls


@pytest.fixture
def obstacle_grid() -> tuple[Point, Point, int, int, frozenset[str]]:
    """
    A 7x7 grid with axis-aligned obstacles forcing a detour.

    A wall column at x=3 leaves a gap only at the bottom row, and a wall
    row at y=2 blocks part of the right half.
    """
    walls = {cell_key(3, y) for y in range(6)}
    walls |= {cell_key(x, 2) for x in range(4, 7) if x != 6}
    return Point(0, 0), Point(6, 0), 7, 7, frozenset(walls)
