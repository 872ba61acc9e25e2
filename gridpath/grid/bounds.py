"""
Grid bounds checks and up-front validation of search/maze inputs.
"""

from __future__ import annotations

from collections.abc import Container

from gridpath.errors import InvalidConfigurationError
from gridpath.grid.point import Point, cell_key

# Neighbour order is part of the output contract: it decides tie-break
# path shape and the order steps are emitted in.
DIRECTIONS: tuple[Point, ...] = (
    Point(1, 0),
    Point(-1, 0),
    Point(0, 1),
    Point(0, -1),
)


def in_bounds(point: Point, width: int, height: int) -> bool:
    """Whether point lies inside a width x height grid."""
    return 0 <= point.x < width and 0 <= point.y < height


def validate_dimensions(width: int, height: int) -> None:
    """Reject non-positive grid sizes."""
    if width <= 0 or height <= 0:
        raise InvalidConfigurationError(
            f"Grid dimensions must be positive, got {width}x{height}"
        )


def validate_endpoints(
    start: Point,
    end: Point,
    width: int,
    height: int,
    walls: Container[str] | None = None,
) -> None:
    """
    Check that start and end are usable cells of the grid.

    Args:
        start: Starting cell
        end: Target cell
        width: Grid width
        height: Grid height
        walls: Wall keys; if given, start and end must not be walls

    Raises:
        InvalidConfigurationError: If any check fails
    """
    validate_dimensions(width, height)

    for label, point in (("start", start), ("end", end)):
        if not in_bounds(point, width, height):
            raise InvalidConfigurationError(
                f"{label} {point} is outside the {width}x{height} grid"
            )
        if walls is not None and cell_key(point) in walls:
            raise InvalidConfigurationError(f"{label} {point} is a wall")
