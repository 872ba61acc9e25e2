"""
Search algorithm base class and the step snapshot it emits.

Every algorithm is a resumable state object: each call to advance() does
just enough work to reach the next event worth showing (a cell discovered
or improved, or the search finishing) and returns an AlgorithmStep for it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Container, Iterable
from dataclasses import dataclass

from gridpath.grid import DIRECTIONS, CellKey, Point, cell_key, in_bounds, validate_endpoints

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Snapshot of a search at one point in time.

    The sets are copied when the step is emitted, so a step held by the
    consumer never changes as the search moves on.

    Attributes:
        path: Best known route from start to the cell just discovered,
            improved or finalized (to end on a successful final step)
        visited: Keys of cells the algorithm considers settled
        frontier: Keys of cells discovered but not yet expanded
        is_final: Whether this is the last step of the search
    """

    path: tuple[Point, ...]
    visited: frozenset[CellKey]
    frontier: frozenset[CellKey]
    is_final: bool = False

    @property
    def length(self) -> int:
        """Number of moves along the path."""
        return max(len(self.path) - 1, 0)

    def connects(self, start: Point, end: Point) -> bool:
        """Whether the path runs from start to end."""
        return bool(self.path) and self.path[0] == start and self.path[-1] == end


class SearchAlgorithm(ABC):
    """
    Abstract base class for stepwise grid searches.

    Subclasses implement _advance(), which must return the next step and
    eventually a step with is_final set. Consumers either call advance()
    until it returns None or simply iterate:

        for step in BreadthFirstSearch(start, end, 10, 10, walls):
            draw(step)

    Movement is 4-directional over a width x height grid; a cell is
    passable unless its key is in walls.
    """

    name: str = "search"
    description: str = ""

    def __init__(
        self,
        start: Point,
        end: Point,
        width: int,
        height: int,
        walls: Container[CellKey] | None = None,
    ) -> None:
        """
        Initialize a search. No work happens until the first advance().

        Args:
            start: Starting cell
            end: Target cell
            width: Grid width in cells
            height: Grid height in cells
            walls: Keys of impassable cells (read only)

        Raises:
            InvalidConfigurationError: If the grid or endpoints are invalid
        """
        walls = walls if walls is not None else frozenset()
        validate_endpoints(start, end, width, height, walls)

        self.start = start
        self.end = end
        self.width = width
        self.height = height
        self._walls = walls

        self._visited: set[CellKey] = set()
        self._frontier: set[CellKey] = set()
        self._previous: dict[CellKey, Point] = {}

        # Cursor over the neighbours of the cell being expanded
        self._current: Point | None = None
        self._pending: deque[Point] = deque()

        self._finished = False
        self._last_step: AlgorithmStep | None = None
        self._step_count = 0

    # -------------------------------------------------------------------------
    # Public stepping API
    # -------------------------------------------------------------------------

    def advance(self) -> AlgorithmStep | None:
        """
        Run the search up to its next event.

        Returns:
            The next AlgorithmStep, or None once the final step was returned
        """
        if self._finished:
            return None

        if self._step_count == 0:
            logger.debug(f"{self.name}: searching {self.start} -> {self.end}")

        step = self._advance()
        self._last_step = step
        self._step_count += 1

        if step.is_final:
            self._finished = True
            if step.connects(self.start, self.end):
                logger.debug(
                    f"{self.name}: found path of {step.length} moves "
                    f"after {self._step_count} steps"
                )
            else:
                logger.debug(f"{self.name}: no path after {self._step_count} steps")

        return step

    def run(self) -> AlgorithmStep:
        """Drain the search and return its final step."""
        while not self._finished:
            self.advance()
        return self._last_step

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def found(self) -> bool:
        """Whether the search has finished with a start-to-end path."""
        return (
            self._finished
            and self._last_step is not None
            and self._last_step.connects(self.start, self.end)
        )

    @property
    def last_step(self) -> AlgorithmStep | None:
        return self._last_step

    @property
    def step_count(self) -> int:
        """Steps emitted so far."""
        return self._step_count

    def __iter__(self) -> SearchAlgorithm:
        return self

    def __next__(self) -> AlgorithmStep:
        step = self.advance()
        if step is None:
            raise StopIteration
        return step

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(start={self.start}, end={self.end}, "
            f"size={self.width}x{self.height})"
        )

    # -------------------------------------------------------------------------
    # Helpers for subclasses
    # -------------------------------------------------------------------------

    @abstractmethod
    def _advance(self) -> AlgorithmStep:
        """Do the work up to the next event and describe it."""
        ...

    def _neighbours(self, cell: Point) -> list[Point]:
        """In-bounds, non-wall neighbours of cell in the fixed direction order."""
        result = []
        for direction in DIRECTIONS:
            neighbour = cell + direction
            if in_bounds(neighbour, self.width, self.height) and (
                cell_key(neighbour) not in self._walls
            ):
                result.append(neighbour)
        return result

    def _expand(self, cell: Point) -> None:
        """Make cell the current cell and queue up its neighbours."""
        self._current = cell
        self._pending = deque(self._neighbours(cell))

    def _reconstruct_path(self, cell: Point) -> tuple[Point, ...]:
        """Walk the previous-cell map back from cell to a cell with no predecessor."""
        path = [cell]
        key = cell_key(cell)
        while key in self._previous:
            cell = self._previous[key]
            path.append(cell)
            key = cell_key(cell)
        path.reverse()
        return tuple(path)

    def _frontier_keys(self) -> Iterable[CellKey]:
        return self._frontier

    def _snapshot(self, path: Iterable[Point], final: bool = False) -> AlgorithmStep:
        return AlgorithmStep(
            path=tuple(path),
            visited=frozenset(self._visited),
            frontier=frozenset(self._frontier_keys()),
            is_final=final,
        )
