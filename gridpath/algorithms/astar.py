"""
A* search with an injected heuristic, plus the heuristics it ships with.

Uniform-cost search is A* with a heuristic of zero.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from gridpath.algorithms.base import AlgorithmStep, SearchAlgorithm
from gridpath.grid import CellKey, Point, cell_key
from gridpath.structures import MinPriorityQueue

Heuristic = Callable[[Point, Point], float]


def euclidean_distance(node: Point, end: Point) -> float:
    """Straight-line distance."""
    return (end - node).magnitude()


def manhattan_distance(node: Point, end: Point) -> float:
    """Sum of axis distances; exact on an open 4-neighbour grid."""
    return (end - node).abs().sum_components()


def zero_heuristic(node: Point, end: Point) -> float:
    return 0


class AStarSearch(SearchAlgorithm):
    """
    Best-first search ordered by f = g + h(node, end).

    The heuristic is not checked for admissibility; an overestimating one
    still terminates but may return a longer path.
    """

    name = "astar"
    description = "A* search with a distance heuristic"

    def __init__(
        self,
        *args,
        heuristic: Heuristic = manhattan_distance,
        name: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        if name is not None:
            self.name = name
        self.heuristic = heuristic

        start_key = cell_key(self.start)
        self._open: MinPriorityQueue[Point] = MinPriorityQueue()
        self._g: dict[CellKey, float] = {start_key: 0}
        self._open.insert(self.start, heuristic(self.start, self.end), start_key)

    def _frontier_keys(self) -> Iterable[CellKey]:
        return self._open.keys()

    def _advance(self) -> AlgorithmStep:
        while True:
            while self._pending:
                neighbour = self._pending.popleft()
                key = cell_key(neighbour)
                tentative = self._g[cell_key(self._current)] + 1

                if tentative < self._g.get(key, math.inf):
                    self._previous[key] = self._current
                    self._g[key] = tentative
                    f_score = tentative + self.heuristic(neighbour, self.end)
                    self._open.insert(neighbour, f_score, key)
                    return self._snapshot(self._reconstruct_path(neighbour))

            node = self._open.extract_min()
            if node is None:
                return self._snapshot((self.start,), final=True)

            if node.value == self.end:
                return self._snapshot(self._reconstruct_path(node.value), final=True)

            self._visited.add(node.key)
            self._expand(node.value)


class UniformCostSearch(AStarSearch):
    """A* without a heuristic."""

    name = "ucs"
    description = "Uniform-cost search (A* with h = 0)"

    def __init__(self, *args, **kwargs) -> None:
        kwargs["heuristic"] = zero_heuristic
        super().__init__(*args, **kwargs)
