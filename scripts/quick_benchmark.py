#!/usr/bin/env python3
"""
Quick benchmark to compare algorithms on a batch of random mazes.

Reports, per algorithm, the average number of emitted steps, cells
visited and path length, plus how often the path was longer than BFS's.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from gridpath.algorithms import ALGORITHMS, get_algorithm
from gridpath.grid import Point
from gridpath.maze import create_maze

# Maze sizes: (width, height)
SIZES = [(11, 11), (21, 15), (30, 20), (41, 31)]

# Mazes per size
SEEDS = range(10)


def run_benchmark():
    print("=" * 70)
    print("Gridpath - Algorithm Comparison")
    print("=" * 70)
    print(f"\nTesting {len(ALGORITHMS)} algorithms on {len(SIZES) * len(SEEDS)} mazes...\n")

    results = {name: [] for name in ALGORITHMS}

    start_time = time.time()
    for width, height in SIZES:
        start, end = Point(0, 0), Point(width - 1, height - 1)
        for seed in SEEDS:
            walls = create_maze(width, height, start, end, seed=seed)
            shortest = None
            for name in ALGORITHMS:
                search = get_algorithm(name, start, end, width, height, walls)
                t0 = time.perf_counter()
                final = search.run()
                elapsed_ms = (time.perf_counter() - t0) * 1000

                # bfs is first in the registry, so later entries can compare
                if name == "bfs":
                    shortest = final.length
                results[name].append(
                    {
                        "steps": search.step_count,
                        "visited": len(final.visited),
                        "length": final.length,
                        "time_ms": elapsed_ms,
                        "shortest": shortest,
                    }
                )

    print(f"{'Algorithm':<18} {'Steps':>8} {'Visited':>8} {'Length':>8} {'Longer':>7} {'ms':>8}")
    print("-" * 70)
    for name, runs in results.items():
        n = len(runs)
        steps = sum(r["steps"] for r in runs) / n
        visited = sum(r["visited"] for r in runs) / n
        length = sum(r["length"] for r in runs) / n
        longer = sum(1 for r in runs if r["length"] > r["shortest"])
        time_ms = sum(r["time_ms"] for r in runs) / n
        print(f"{name:<18} {steps:>8.1f} {visited:>8.1f} {length:>8.1f} {longer:>7} {time_ms:>8.2f}")

    print(f"\nCompleted in {time.time() - start_time:.1f}s")


if __name__ == "__main__":
    run_benchmark()
