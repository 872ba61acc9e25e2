"""
Maze generation module.

Usage:
    from gridpath.maze import create_maze

    walls = create_maze(width, height, start, end, seed=42)
"""

from gridpath.maze.generator import MazeGenerator, create_maze

__all__ = ["MazeGenerator", "create_maze"]
