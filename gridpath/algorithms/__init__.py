"""
Search algorithms module.

Provides stepwise grid searches that emit AlgorithmStep snapshots:
- BreadthFirstSearch: FIFO, shortest path
- DepthFirstSearch: LIFO, any path
- DijkstraSearch: Priority queue on path cost
- AStarSearch: Priority queue on cost + heuristic
- UniformCostSearch: A* with a zero heuristic
"""

from __future__ import annotations

from collections.abc import Callable, Container
from functools import partial

from gridpath.algorithms.astar import (
    AStarSearch,
    Heuristic,
    UniformCostSearch,
    euclidean_distance,
    manhattan_distance,
    zero_heuristic,
)
from gridpath.algorithms.base import AlgorithmStep, SearchAlgorithm
from gridpath.algorithms.bfs import BreadthFirstSearch
from gridpath.algorithms.dfs import DepthFirstSearch
from gridpath.algorithms.dijkstra import DijkstraSearch
from gridpath.grid import CellKey, Point

__all__ = [
    "AlgorithmStep",
    "SearchAlgorithm",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraSearch",
    "AStarSearch",
    "UniformCostSearch",
    "Heuristic",
    "euclidean_distance",
    "manhattan_distance",
    "zero_heuristic",
    "ALGORITHMS",
    "get_algorithm",
    "solve",
]

ALGORITHMS: dict[str, Callable[..., SearchAlgorithm]] = {
    "bfs": BreadthFirstSearch,
    "dfs": DepthFirstSearch,
    "dijkstra": DijkstraSearch,
    "astar-euclidean": partial(
        AStarSearch, heuristic=euclidean_distance, name="astar-euclidean"
    ),
    "astar-manhattan": partial(
        AStarSearch, heuristic=manhattan_distance, name="astar-manhattan"
    ),
    "ucs": UniformCostSearch,
}


def get_algorithm(
    name: str,
    start: Point,
    end: Point,
    width: int,
    height: int,
    walls: Container[CellKey] | None = None,
) -> SearchAlgorithm:
    """
    Build a search by name.

    Args:
        name: Algorithm identifier (bfs, dfs, dijkstra, astar-euclidean,
            astar-manhattan, ucs)
        start: Starting cell
        end: Target cell
        width: Grid width
        height: Grid height
        walls: Keys of impassable cells

    Returns:
        A fresh, not yet advanced search

    Raises:
        ValueError: If the algorithm name is unknown
        InvalidConfigurationError: If the grid or endpoints are invalid
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return ALGORITHMS[name](start, end, width, height, walls)


def solve(
    name: str,
    start: Point,
    end: Point,
    width: int,
    height: int,
    walls: Container[CellKey] | None = None,
) -> AlgorithmStep:
    """Run a named search to completion and return its final step."""
    return get_algorithm(name, start, end, width, height, walls).run()
