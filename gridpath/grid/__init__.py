"""
Grid geometry module.

Provides the coordinate model shared by the search algorithms and the
maze generator:
- Point: Immutable (x, y) coordinate
- cell_key / parse_key: Canonical "x,y" string keys
- DIRECTIONS, in_bounds: 4-neighbour movement
- validate_endpoints: Up-front input checks
"""

from gridpath.grid.bounds import (
    DIRECTIONS,
    in_bounds,
    validate_dimensions,
    validate_endpoints,
)
from gridpath.grid.point import CellKey, Point, cell_key, parse_key

__all__ = [
    "CellKey",
    "Point",
    "cell_key",
    "parse_key",
    "DIRECTIONS",
    "in_bounds",
    "validate_dimensions",
    "validate_endpoints",
]
