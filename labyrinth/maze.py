import logging
import random
from enum import Enum
from typing import List, NamedTuple, Optional, Set, Tuple

from labyrinth.core.grid import Grid, MazeSizeError, MIN_SIZE
from labyrinth.core.complexity import MazeInspector
from labyrinth.algo.walk import RandomWalk
from labyrinth.algo.prim import PrimsAlgorithm
from labyrinth.algo.division import RecursiveDivision
from labyrinth.algo.base import trace_path
from labyrinth.algo.solvers import RecursiveBacktracking, DeadEndFiller

logger = logging.getLogger(__name__)


class GenerationKind(Enum):
    RANDOM_WALK = "walk"
    PRIM = "prim"
    RECURSIVE_DIVISION = "division"


class SolvingKind(Enum):
    RECURSIVE_BACKTRACKING = "backtrack"
    DEAD_END_FILLING = "deadend"


class SolveState(Enum):
    UNSOLVED = "unsolved"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


class CellInfo(NamedTuple):
    is_wall: bool
    is_visited: bool
    is_entry: bool
    is_goal: bool


GENERATORS = {
    GenerationKind.RANDOM_WALK: RandomWalk,
    GenerationKind.PRIM: PrimsAlgorithm,
    GenerationKind.RECURSIVE_DIVISION: RecursiveDivision,
}

SOLVERS = {
    SolvingKind.RECURSIVE_BACKTRACKING: RecursiveBacktracking,
    SolvingKind.DEAD_END_FILLING: DeadEndFiller,
}


def _odd(n: int) -> int:
    return n + 1 if n % 2 == 0 else n


class Maze:
    """
    A perfect maze with a fixed entry on the left border (row 1) and goal on
    the right border (second-to-last row).

    Dimensions below 3 are rejected; even dimensions are rounded up to the
    next odd value so the border is always wall.
    """

    def __init__(self, height: int, width: int,
                 strategy: GenerationKind = GenerationKind.RANDOM_WALK,
                 seed: int = None, rng: Optional[random.Random] = None):
        if height < MIN_SIZE or width < MIN_SIZE:
            raise MazeSizeError(f"Can't create a maze smaller than {MIN_SIZE}x{MIN_SIZE} "
                                f"(got {height}x{width})")
        if strategy not in GENERATORS:
            raise ValueError(f"Unknown generation strategy: {strategy!r}")

        height, width = _odd(height), _odd(width)
        self.strategy = strategy
        self.rng = rng if rng is not None else random.Random(seed)

        # Division adds walls to an open field, the others carve from solid rock
        self.grid = Grid(height, width, walls=strategy is not GenerationKind.RECURSIVE_DIVISION)
        self.entry: Tuple[int, int] = (1, 0)
        self.goal: Tuple[int, int] = (height - 2, width - 1)
        self.state = SolveState.UNSOLVED

        logger.debug(f"Generating {height}x{width} maze with {strategy.value}")
        generator = GENERATORS[strategy](self.grid, self.entry, self.goal, rng=self.rng)
        generator.run_all()
        logger.debug(f"Generation finished after {generator.step_count} steps")

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.grid.height, self.grid.width)

    def solve(self, strategy: SolvingKind = SolvingKind.RECURSIVE_BACKTRACKING):
        if strategy not in SOLVERS:
            raise ValueError(f"Unknown solving strategy: {strategy!r}")

        if self.state is not SolveState.UNSOLVED:
            self.unsolve()

        self.state = SolveState.IN_PROGRESS
        solver = SOLVERS[strategy](self.grid)
        solver.run_all(self.entry, self.goal)
        self.state = SolveState.SOLVED if self.is_solved() else SolveState.UNSOLVED
        logger.debug(f"{strategy.value}: path length {len(solver.path)}, "
                     f"{solver.visited_count} cells touched")

    def unsolve(self):
        self.grid.clear_visited()
        self.state = SolveState.UNSOLVED

    def is_solved(self) -> bool:
        return self.grid.is_visited(*self.goal)

    def cell_at(self, row: int, col: int) -> CellInfo:
        return CellInfo(
            is_wall=self.grid.is_wall(row, col),
            is_visited=self.grid.is_visited(row, col),
            is_entry=(row, col) == self.entry,
            is_goal=(row, col) == self.goal,
        )

    def visited_cells(self) -> Set[Tuple[int, int]]:
        return {pos for pos in self.grid.positions() if self.grid.is_visited(*pos)}

    def path(self) -> List[Tuple[int, int]]:
        """Ordered entry->goal cells among the visited ones (empty when unsolved)."""
        return trace_path(self.grid, self.entry, self.goal)

    def stats(self):
        return MazeInspector.calculate_stats(self.grid)

    def __str__(self):
        lines = []
        for row in range(self.height):
            chars = []
            for col in range(self.width):
                cell = self.cell_at(row, col)
                if cell.is_entry: chars.append('S')
                elif cell.is_goal: chars.append('G')
                elif cell.is_wall: chars.append('#')
                elif cell.is_visited: chars.append('.')
                else: chars.append(' ')
            lines.append(''.join(chars))
        return '\n'.join(lines)


def construct(height: int, width: int, strategy: GenerationKind,
              seed: int = None, rng: Optional[random.Random] = None) -> Maze:
    return Maze(height, width, strategy, seed=seed, rng=rng)
