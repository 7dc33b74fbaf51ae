import random
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, List, Optional, Tuple
from labyrinth.core.grid import Grid

Position = Tuple[int, int]


class Generator(ABC):
    # Yield a progress update every N steps
    PROGRESS_INTERVAL = 100

    def __init__(self, grid: Grid, entry: Position, goal: Position,
                 seed: int = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.entry = entry
        self.goal = goal
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

    def open_endpoints(self):
        self.grid.set_wall(*self.entry, wall=False)
        self.grid.set_wall(*self.goal, wall=False)

    def random_lattice_cell(self) -> Position:
        """Random interior cell with both coordinates odd (rejection sampled)."""
        row = self.rng.randrange(1, self.grid.height - 1)
        col = self.rng.randrange(1, self.grid.width - 1)
        while row % 2 == 0:
            row = self.rng.randrange(1, self.grid.height - 1)
        while col % 2 == 0:
            col = self.rng.randrange(1, self.grid.width - 1)
        return (row, col)


class Solver(ABC):
    PROGRESS_INTERVAL = 100

    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Position] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Position, end: Position) -> Iterator[str]:
        pass

    def run_all(self, start: Position, end: Position):
        for _ in self.run(start, end):
            pass


def trace_path(grid: Grid, start: Position, end: Position) -> List[Position]:
    """
    Shortest start->end walk over open, visited cells.
    Empty if the visited marks do not connect the two.
    """
    if not (grid.is_visited(*start) and grid.is_visited(*end)):
        return []

    parents = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            break
        for n in grid.get_open_neighbors(*current):
            if n not in parents and grid.is_visited(*n):
                parents[n] = current
                queue.append(n)

    if end not in parents:
        return []

    path = []
    curr = end
    while curr is not None:
        path.append(curr)
        curr = parents[curr]
    path.reverse()
    return path
