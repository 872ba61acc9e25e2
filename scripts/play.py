#!/usr/bin/env python3
"""
Gridpath CLI - run one search on an open grid or a generated maze.

Usage:
    python scripts/play.py
    python scripts/play.py --algorithm bfs --width 31 --height 21 --maze --seed 7
    python scripts/play.py --algorithm dfs --maze --animate --delay 0.02
    python scripts/play.py --start 0,0 --end 9,4 --width 10 --height 5

Algorithms:
    bfs             - Breadth-first search
    dfs             - Depth-first search
    dijkstra        - Dijkstra's algorithm
    astar-euclidean - A* with straight-line heuristic
    astar-manhattan - A* with Manhattan heuristic
    ucs             - Uniform-cost search (A* with h = 0)

Legend:
    #  wall      S  start     E  end
    *  path      o  frontier  .  visited
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment overrides must be in place before the config is imported
load_dotenv(project_root / ".env")

from gridpath import config  # noqa: E402
from gridpath.algorithms import ALGORITHMS, AlgorithmStep, get_algorithm  # noqa: E402
from gridpath.errors import GridPathError  # noqa: E402
from gridpath.grid import Point, cell_key, parse_key  # noqa: E402
from gridpath.maze import MazeGenerator  # noqa: E402


def format_grid(
    step: AlgorithmStep,
    width: int,
    height: int,
    walls: frozenset[str],
    start: Point,
    end: Point,
) -> str:
    """Draw a step as text, one character per cell."""
    on_path = {cell_key(p) for p in step.path}
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            key = cell_key(x, y)
            if key == cell_key(start):
                row.append("S")
            elif key == cell_key(end):
                row.append("E")
            elif key in walls:
                row.append("#")
            elif key in on_path:
                row.append("*")
            elif key in step.frontier:
                row.append("o")
            elif key in step.visited:
                row.append(".")
            else:
                row.append(" ")
        rows.append("".join(row))
    return "\n".join(rows)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid search and print the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        type=str,
        default=config.DEFAULT_ALGORITHM,
        choices=list(ALGORITHMS.keys()),
        help=f"Search algorithm (default: {config.DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=config.DEFAULT_GRID_WIDTH,
        help=f"Grid width (default: {config.DEFAULT_GRID_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=config.DEFAULT_GRID_HEIGHT,
        help=f"Grid height (default: {config.DEFAULT_GRID_HEIGHT})",
    )
    parser.add_argument(
        "--start",
        type=parse_key,
        default=None,
        help="Start cell as x,y (default: top-left corner)",
    )
    parser.add_argument(
        "--end",
        type=parse_key,
        default=None,
        help="End cell as x,y (default: bottom-right corner)",
    )
    parser.add_argument(
        "--maze",
        action="store_true",
        help="Generate a maze instead of using an open grid",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for maze generation",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Redraw the grid after every step",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=config.ANIMATION_DELAY,
        help=f"Seconds between animation frames (default: {config.ANIMATION_DELAY})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    start = args.start or Point(0, 0)
    end = args.end or Point(args.width - 1, args.height - 1)

    try:
        walls: frozenset[str] = frozenset()
        if args.maze:
            generator = MazeGenerator(args.width, args.height, start, end, seed=args.seed)
            walls = generator.generate()
            print(f"Maze generated in {generator.attempts} attempt(s)")

        search = get_algorithm(args.algorithm, start, end, args.width, args.height, walls)
    except GridPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("Gridpath")
    print("=" * 60)
    print(f"  Grid:      {args.width}x{args.height}{' maze' if args.maze else ''}")
    print(f"  Start:     {start}")
    print(f"  End:       {end}")
    print(f"  Algorithm: {search.name} - {search.description}")
    print("=" * 60 + "\n")

    try:
        for step in search:
            if args.animate:
                # Clear screen and home the cursor
                print("\033[2J\033[H", end="")
                print(format_grid(step, args.width, args.height, walls, start, end))
                print(f"\nStep {search.step_count}")
                time.sleep(args.delay)
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    final = search.last_step
    if not args.animate:
        print(format_grid(final, args.width, args.height, walls, start, end))

    print("\n" + "=" * 60)
    if search.found:
        print(f"Path found: {final.length} moves in {search.step_count} steps")
    else:
        print(f"No path from {start} to {end} ({search.step_count} steps)")
    print(f"Visited {len(final.visited)} cells, {len(final.frontier)} left in frontier")
    print("=" * 60)

    return 0 if search.found else 1


if __name__ == "__main__":
    sys.exit(main())
