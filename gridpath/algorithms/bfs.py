"""
Breadth-first search.

Cells are marked visited as soon as they are enqueued, so each cell is
discovered exactly once and the first path to the goal is a shortest one.
"""

from __future__ import annotations

from gridpath.algorithms.base import AlgorithmStep, SearchAlgorithm
from gridpath.grid import cell_key
from gridpath.structures import Queue


class BreadthFirstSearch(SearchAlgorithm):
    """
    FIFO exploration over the grid.

    Emits a step for every newly discovered cell, then a final step when
    the goal is dequeued (or an empty path once the queue runs dry).
    """

    name = "bfs"
    description = "Breadth-first search (shortest path on unit-cost grids)"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._queue: Queue = Queue()
        self._queue.enqueue(self.start)
        self._visited.add(cell_key(self.start))

    def _advance(self) -> AlgorithmStep:
        while True:
            while self._pending:
                neighbour = self._pending.popleft()
                key = cell_key(neighbour)
                if key in self._visited:
                    continue

                self._visited.add(key)
                self._previous[key] = self._current
                step = self._snapshot(self._reconstruct_path(neighbour))

                self._frontier.add(key)
                self._queue.enqueue(neighbour)
                return step

            cell = self._queue.dequeue()
            if cell is None:
                return self._snapshot((), final=True)

            if cell == self.end:
                return self._snapshot(self._reconstruct_path(cell), final=True)

            self._frontier.discard(cell_key(cell))
            self._expand(cell)
