import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'labyrinth' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.maze import Maze, GenerationKind, SolvingKind
from labyrinth.core.grid import MazeSizeError

GEN_CHOICES = [kind.value for kind in GenerationKind]
SOLVE_CHOICES = [kind.value for kind in SolvingKind]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Labyrinth: perfect maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate (and optionally solve) a maze")
    gen_parser.add_argument("--height", type=int, default=15, help="Maze Height (rounded up to odd)")
    gen_parser.add_argument("--width", type=int, default=15, help="Maze Width (rounded up to odd)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="walk", choices=GEN_CHOICES, help="Generation Algorithm")
    gen_parser.add_argument("--solve", type=str, default=None, choices=SOLVE_CHOICES, help="Solver algorithm")
    gen_parser.add_argument("--visual", action="store_true", help="Open an interactive window")
    gen_parser.add_argument("--plain", action="store_true", help="Print ASCII instead of coloured blocks")

    # Compare Command
    cmp_parser = subparsers.add_parser("compare", help="Solve one maze with every solver")
    cmp_parser.add_argument("--height", type=int, default=21, help="Maze Height")
    cmp_parser.add_argument("--width", type=int, default=21, help="Maze Width")
    cmp_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    cmp_parser.add_argument("--algo", type=str, default="walk", choices=GEN_CHOICES, help="Generation Algorithm")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator/solver pair")
    bench_parser.add_argument("--size", type=int, default=201, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def show(maze: Maze, plain: bool):
    if plain:
        print(maze)
    else:
        from labyrinth.viz.terminal import render
        render(maze)


def cmd_generate(args, logger):
    kind = GenerationKind(args.algo)
    logger.info(f"Generating {args.height}x{args.width} maze with {kind.value.upper()}...")
    maze = Maze(args.height, args.width, kind, seed=args.seed)
    logger.info(f"Stats: {maze.stats()}")

    if args.solve:
        maze.solve(SolvingKind(args.solve))
        logger.info(f"Solved: {maze.is_solved()}, path length {len(maze.path())}")

    if args.visual:
        from labyrinth.viz.renderer import Renderer
        renderer = Renderer(maze, regenerate=lambda: Maze(args.height, args.width, kind))
        renderer.init_window()
        renderer.run_loop()
    else:
        show(maze, args.plain)


def cmd_compare(args, logger):
    kind = GenerationKind(args.algo)
    maze = Maze(args.height, args.width, kind, seed=args.seed)

    results = {}
    for solving in SolvingKind:
        maze.solve(solving)
        results[solving] = maze.visited_cells()
        logger.info(f"{solving.value}: solved={maze.is_solved()} marked={len(results[solving])}")
        maze.unsolve()

    backtrack = results[SolvingKind.RECURSIVE_BACKTRACKING]
    filled = results[SolvingKind.DEAD_END_FILLING]
    extra = filled - backtrack
    missing = backtrack - filled
    if missing:
        logger.warning(f"Dead-end filling dropped {len(missing)} cells of the backtracking path")
    print(f"Shared path cells: {len(backtrack & filled)}")
    print(f"Only dead-end filling: {len(extra)}")
    print(f"Only backtracking: {len(missing)}")


def cmd_benchmark(args, logger):
    logger.info(f"Running benchmark suite (Size: {args.size}x{args.size})...")

    print(f"\n{'GENERATOR':<10} | {'SOLVER':<10} | {'GEN (s)':<10} | {'SOLVE (s)':<10} | {'PATH LEN':<10}")
    print("-" * 62)

    for gen_kind in GenerationKind:
        t0 = time.time()
        maze = Maze(args.size, args.size, gen_kind, seed=args.seed)
        gen_time = time.time() - t0

        for solve_kind in SolvingKind:
            t0 = time.time()
            maze.solve(solve_kind)
            solve_time = time.time() - t0
            path_len = len(maze.path())
            maze.unsolve()

            print(f"{gen_kind.value:<10} | {solve_kind.value:<10} | {gen_time:<10.4f} | {solve_time:<10.4f} | {path_len:<10}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("labyrinth")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            cmd_generate(args, logger)
        elif args.command == "compare":
            cmd_compare(args, logger)
        elif args.command == "benchmark":
            cmd_benchmark(args, logger)
    except MazeSizeError as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
