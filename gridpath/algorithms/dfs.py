"""
Depth-first search.

Cells are marked visited when popped, so a cell may sit on the stack
several times; whichever entry is popped first fixes its predecessor.
Paths are generally not shortest.
"""

from __future__ import annotations

from gridpath.algorithms.base import AlgorithmStep, SearchAlgorithm
from gridpath.grid import Point, cell_key


class DepthFirstSearch(SearchAlgorithm):
    """LIFO exploration; emits a step per discovered, not yet visited cell."""

    name = "dfs"
    description = "Depth-first search (finds a path, not necessarily shortest)"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # (cell, cell it was pushed from)
        self._stack: list[tuple[Point, Point | None]] = [(self.start, None)]

    def _advance(self) -> AlgorithmStep:
        while True:
            while self._pending:
                neighbour = self._pending.popleft()
                key = cell_key(neighbour)

                step = None
                if key not in self._visited:
                    step = self._snapshot(
                        self._reconstruct_path(self._current) + (neighbour,)
                    )

                self._frontier.add(key)
                self._stack.append((neighbour, self._current))
                if step is not None:
                    return step

            if not self._stack:
                return self._snapshot((), final=True)

            cell, parent = self._stack.pop()
            key = cell_key(cell)

            if cell == self.end:
                if parent is not None:
                    self._previous[key] = parent
                return self._snapshot(self._reconstruct_path(cell), final=True)

            self._frontier.discard(key)
            if key in self._visited:
                continue

            self._visited.add(key)
            if parent is not None:
                self._previous[key] = parent
            self._expand(cell)
