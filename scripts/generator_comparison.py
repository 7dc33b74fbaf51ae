import sys
import os
import time
import argparse

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.grid import Grid
from labyrinth.core.complexity import MazeInspector
from labyrinth.algo.walk import RandomWalk
from labyrinth.algo.prim import PrimsAlgorithm
from labyrinth.algo.division import RecursiveDivision
from labyrinth.algo.solvers import RecursiveBacktracking, DeadEndFiller

# ==========================================
# GLOBAL CONFIGURATION
# name -> (generator class, starts as solid wall)
# ==========================================
GENERATORS = {
    "walk": (RandomWalk, True),
    "prim": (PrimsAlgorithm, True),
    "division": (RecursiveDivision, False),
}

SOLVERS = {
    "backtrack": RecursiveBacktracking,
    "deadend": DeadEndFiller,
}


def build(name, size, seed):
    cls, walls = GENERATORS[name]
    grid = Grid(size, size, walls=walls)
    entry, goal = (1, 0), (size - 2, size - 1)
    gen = cls(grid, entry, goal, seed=seed)
    t0 = time.time()
    gen.run_all()
    return grid, entry, goal, time.time() - t0


def run_comparison():
    parser = argparse.ArgumentParser(description="Generator texture and solver timing comparison")
    parser.add_argument("--sizes", type=int, nargs="+", default=[51, 101, 201], help="Odd maze sizes")
    parser.add_argument("--seed", type=int, default=42, help="Random Seed")
    args = parser.parse_args()

    print("=== GENERATOR COMPARISON ===")
    header = f"{'ALGO':<9} | {'SIZE':<5} | {'GEN (s)':<8} | {'DEAD %':<7} | {'JUNCT':<6} | {'PERFECT':<7}"
    for solver_name in SOLVERS:
        header += f" | {solver_name.upper() + ' (s)':<14}"
    print(header)
    print("-" * len(header))

    for size in args.sizes:
        if size % 2 == 0:
            size += 1
        for name in GENERATORS:
            grid, entry, goal, gen_time = build(name, size, args.seed)
            stats = MazeInspector.calculate_stats(grid)
            perfect = MazeInspector.is_perfect(grid)

            row = (f"{name:<9} | {size:<5} | {gen_time:<8.4f} | {stats['dead_end_percent']:<7.2f} | "
                   f"{stats['junctions']:<6} | {str(perfect):<7}")

            for solver_cls in SOLVERS.values():
                grid.clear_visited()
                solver = solver_cls(grid)
                t0 = time.time()
                solver.run_all(entry, goal)
                row += f" | {time.time() - t0:<14.4f}"
            print(row)


if __name__ == "__main__":
    run_comparison()
