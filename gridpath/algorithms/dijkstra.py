"""
Dijkstra's algorithm on a unit-cost grid.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from gridpath.algorithms.base import AlgorithmStep, SearchAlgorithm
from gridpath.grid import CellKey, Point, cell_key
from gridpath.structures import MinPriorityQueue


class DijkstraSearch(SearchAlgorithm):
    """
    Uniform-cost expansion using the indexed priority queue.

    Every improvement to a neighbour's tentative cost emits a step. The
    final step reconstructs whatever path to end the previous-cell map
    holds, which is just (end,) when end was never reached.
    """

    name = "dijkstra"
    description = "Dijkstra's algorithm (shortest path, no heuristic)"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        start_key = cell_key(self.start)
        self._open: MinPriorityQueue[Point] = MinPriorityQueue()
        self._cost: dict[CellKey, float] = {start_key: 0}
        self._open.insert(self.start, 0, start_key)

    def _frontier_keys(self) -> Iterable[CellKey]:
        return self._open.keys()

    def _advance(self) -> AlgorithmStep:
        while True:
            while self._pending:
                neighbour = self._pending.popleft()
                key = cell_key(neighbour)
                distance = self._cost[cell_key(self._current)] + 1

                if distance < self._cost.get(key, math.inf):
                    self._cost[key] = distance
                    self._previous[key] = self._current
                    self._open.insert(neighbour, distance, key)
                    return self._snapshot(self._reconstruct_path(neighbour))

            node = self._open.extract_min()
            if node is None:
                return self._snapshot(self._reconstruct_path(self.end), final=True)

            key = node.key
            if key in self._visited:
                continue
            self._visited.add(key)

            if node.value == self.end:
                return self._snapshot(self._reconstruct_path(self.end), final=True)

            self._expand(node.value)
