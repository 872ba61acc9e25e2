"""
Randomized spanning-tree maze generator.

Carves passages with a randomized Prim-style frontier walk on a two-cell
stride, clips the result back to the requested size, and retries until a
search confirms start and end are connected.

Usage:
    from gridpath.maze import create_maze

    walls = create_maze(21, 15, Point(0, 0), Point(20, 14), seed=7)
"""

from __future__ import annotations

import logging
import random

import numpy as np

from gridpath.algorithms import ALGORITHMS, solve
from gridpath.config import MAZE_MAX_ATTEMPTS, MAZE_SOLVER
from gridpath.errors import InvalidConfigurationError, MazeGenerationError
from gridpath.grid import DIRECTIONS, CellKey, Point, cell_key, in_bounds, validate_endpoints
from gridpath.structures import OrderedSet

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Builds solvable wall layouts for a width x height grid.

    Each attempt works on a padded grid whose dimensions are forced odd,
    so stride-2 carving lines corridors up with the outer edge. Start is
    always a seed of the carve. End is tied to the nearest lattice cell in
    start's direction by a short connector, and that cell becomes a second
    seed unless it is start itself. The two trees are joined by exactly
    one passage the first time they touch.

    Attributes:
        width: Requested grid width
        height: Requested grid height
        start: Cell that must connect to end
        end: Cell that must connect to start
        max_attempts: Attempts before MazeGenerationError is raised
        solver: Registry name of the algorithm used to verify solvability
        attempts: Attempts used by the last generate() call
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Point,
        end: Point,
        seed: int | None = None,
        max_attempts: int = MAZE_MAX_ATTEMPTS,
        solver: str = MAZE_SOLVER,
    ) -> None:
        """
        Initialize the generator.

        Args:
            width: Grid width
            height: Grid height
            start: Start cell
            end: End cell (must differ from start)
            seed: Random seed for reproducible mazes
            max_attempts: Upper bound on regenerations
            solver: Algorithm name used for the solvability check

        Raises:
            InvalidConfigurationError: If the grid, endpoints or attempt
                limit are invalid
            ValueError: If solver is not a known algorithm
        """
        validate_endpoints(start, end, width, height)
        if start == end:
            raise InvalidConfigurationError(f"start and end are the same cell {start}")
        if max_attempts < 1:
            raise InvalidConfigurationError(
                f"max_attempts must be at least 1, got {max_attempts}"
            )
        if solver not in ALGORITHMS:
            available = ", ".join(ALGORITHMS.keys())
            raise ValueError(f"Unknown algorithm '{solver}'. Available: {available}")

        self.width = width
        self.height = height
        self.start = start
        self.end = end
        self.max_attempts = max_attempts
        self.solver = solver
        self.attempts = 0

        self._rng = random.Random(seed)
        self._padded_width = width + 1 if width % 2 == 0 else width
        self._padded_height = height + 1 if height % 2 == 0 else height

    def generate(self) -> frozenset[CellKey]:
        """
        Generate a maze, regenerating until it is solvable.

        Returns:
            Keys of the wall cells over the requested grid

        Raises:
            MazeGenerationError: If every attempt came out unsolvable
        """
        for attempt in range(1, self.max_attempts + 1):
            self.attempts = attempt
            logger.debug(
                f"Maze attempt {attempt}/{self.max_attempts} "
                f"({self.width}x{self.height})"
            )

            walls = self._carve()
            final = solve(self.solver, self.start, self.end, self.width, self.height, walls)

            if final.connects(self.start, self.end) and final.length >= 1:
                logger.info(
                    f"Generated {self.width}x{self.height} maze in {attempt} "
                    f"attempt(s), solution length {final.length}"
                )
                return walls

            logger.warning(f"Maze attempt {attempt} is unsolvable, retrying")

        logger.error(f"Giving up after {self.max_attempts} unsolvable mazes")
        raise MazeGenerationError(self.max_attempts)

    def _lattice_neighbours(self, cell: Point) -> list[tuple[Point, Point]]:
        """Stride-2 neighbours of cell inside the padded grid, with their direction."""
        result = []
        for direction in DIRECTIONS:
            neighbour = cell + direction.scale(2)
            if in_bounds(neighbour, self._padded_width, self._padded_height):
                result.append((neighbour, direction))
        return result

    def _end_connector(self) -> list[Point]:
        """
        Cells leading from end onto start's stride-2 lattice.

        Steps one cell toward start on each axis whose parity differs from
        start's. The last cell returned is a lattice cell, and is end itself
        when end already sits on the lattice.
        """
        cells = [self.end]
        x, y = self.end.x, self.end.y
        if (x - self.start.x) % 2:
            x += 1 if self.start.x > x else -1
            cells.append(Point(x, y))
        if (y - self.start.y) % 2:
            y += 1 if self.start.y > y else -1
            cells.append(Point(x, y))
        return cells

    def _carve(self) -> frozenset[CellKey]:
        """One generation attempt: carve the padded grid, then clip it."""
        is_wall = np.ones((self._padded_height, self._padded_width), dtype=bool)

        def open_cell(cell: Point) -> None:
            is_wall[cell.y, cell.x] = False

        # in-maze cell -> the seed whose tree it belongs to
        in_maze: dict[Point, Point] = {}
        frontier: OrderedSet[Point] = OrderedSet()

        connector = self._end_connector()
        anchor = connector[-1]

        open_cell(self.start)
        for cell in connector:
            open_cell(cell)
        in_maze[self.start] = self.start
        seeds = [self.start]

        if anchor != self.start:
            in_maze[anchor] = anchor
            seeds.append(anchor)

        offset = anchor - self.start
        merged = len(seeds) == 1
        if not merged and offset.abs().sum_components() == 2 and 0 in (offset.x, offset.y):
            open_cell(Point(self.start.x + offset.x // 2, self.start.y + offset.y // 2))
            merged = True

        for seed in seeds:
            for neighbour, _ in self._lattice_neighbours(seed):
                if neighbour not in in_maze:
                    frontier.add(neighbour)

        while len(frontier) > 0:
            cell = frontier.random(self._rng)
            neighbours = self._lattice_neighbours(cell)
            joined = [(n, d) for n, d in neighbours if n in in_maze]

            if not joined:
                frontier.remove(cell)
                continue

            target, direction = self._rng.choice(joined)
            open_cell(cell + direction)
            open_cell(cell)
            in_maze[cell] = in_maze[target]

            if not merged:
                for other, other_direction in joined:
                    if in_maze[other] != in_maze[target]:
                        open_cell(cell + other_direction)
                        merged = True
                        break

            frontier.remove(cell)
            for neighbour, _ in neighbours:
                if neighbour not in in_maze:
                    frontier.add(neighbour)

        clipped = is_wall[: self.height, : self.width]
        return frozenset(cell_key(int(x), int(y)) for y, x in np.argwhere(clipped))


def create_maze(
    width: int,
    height: int,
    start: Point,
    end: Point,
    seed: int | None = None,
    max_attempts: int = MAZE_MAX_ATTEMPTS,
) -> frozenset[CellKey]:
    """
    Generate a solvable maze.

    Returns:
        Keys of the wall cells; start and end are never walls and are
        always connected

    Raises:
        InvalidConfigurationError: If the grid or endpoints are invalid
        MazeGenerationError: If no solvable maze was found in max_attempts
    """
    return MazeGenerator(width, height, start, end, seed=seed, max_attempts=max_attempts).generate()
