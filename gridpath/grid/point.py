"""
Point and cell-key model.

A Point is an immutable (x, y) grid coordinate. Cell keys are the
canonical string form of a Point ("x,y") used wherever coordinates act
as set members or dict keys: walls, visited, frontier, previous-cell maps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from gridpath.config import CELL_KEY_SEPARATOR

CellKey = str


@dataclass(frozen=True)
class Point:
    """
    A 2D integer grid coordinate.

    Attributes:
        x: Column index (grows to the right)
        y: Row index (grows downwards)
    """

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, scalar: int) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def abs(self) -> Point:
        """Component-wise absolute value."""
        return Point(abs(self.x), abs(self.y))

    def sum_components(self) -> int:
        return self.x + self.y

    def magnitude(self) -> float:
        """Euclidean length of the vector from the origin."""
        return math.hypot(self.x, self.y)

    @property
    def key(self) -> CellKey:
        return cell_key(self)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def cell_key(point: Point | int, y: int | None = None) -> CellKey:
    """
    Encode a coordinate as its canonical cell key.

    Accepts either a Point or separate x and y integers:

        cell_key(Point(3, 4)) == cell_key(3, 4) == "3,4"
    """
    if isinstance(point, Point):
        return f"{point.x}{CELL_KEY_SEPARATOR}{point.y}"
    if y is None:
        raise TypeError("cell_key() needs a Point or both x and y")
    return f"{point}{CELL_KEY_SEPARATOR}{y}"


def parse_key(key: CellKey) -> Point:
    """
    Decode a cell key back into a Point.

    Raises:
        ValueError: If the key is not two integers joined by the separator
    """
    parts = key.split(CELL_KEY_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Malformed cell key: {key!r}")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Malformed cell key: {key!r}") from None
