from typing import Iterator, List
from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator


class RandomWalk(Generator):
    """
    Randomized depth-first carve. Moves two cells at a time (cell, wall, cell)
    and opens the wall in between. The explicit stack replays the exact order
    a recursive walk would take.
    """

    def run(self) -> Iterator[str]:
        grid = self.grid
        self.open_endpoints()

        # Frame: [row, col, shuffled directions, next direction index]
        stack: List[list] = []

        def enter(row, col):
            grid.set_wall(row, col, wall=False)
            grid.set_visited(row, col)
            directions = list(Grid.DIRECTIONS)
            self.rng.shuffle(directions)
            stack.append([row, col, directions, 0])

        enter(*self.random_lattice_cell())

        while stack:
            frame = stack[-1]
            row, col, directions, i = frame

            if i == len(directions):
                # Backtrack
                stack.pop()
                continue

            frame[3] += 1
            direction = directions[i]
            nrow, ncol = Grid.step(row, col, direction, 2)

            if grid.is_interior(nrow, ncol) and not grid.is_visited(nrow, ncol):
                wrow, wcol = Grid.step(row, col, direction)
                grid.set_wall(wrow, wcol, wall=False)
                enter(nrow, ncol)
                self.step_count += 1

                if self.step_count % self.PROGRESS_INTERVAL == 0:
                    yield f"Carving... Stack: {len(stack)}"

        # Visited was only a carve marker
        grid.clear_visited()
        yield "Done"
