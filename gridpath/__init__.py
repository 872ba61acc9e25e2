"""
Grid pathfinding and maze generation engine.

Produces step-by-step traces of classical search algorithms (BFS, DFS,
Dijkstra, A*, uniform-cost) over a 2D grid, and generates randomized
mazes that are guaranteed to be solvable.
"""

__version__ = "0.1.0"
