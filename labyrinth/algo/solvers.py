from collections import deque
from typing import Deque, Iterator, List, Tuple
from labyrinth.core.grid import Grid
from labyrinth.algo.base import Solver, Position, trace_path


class RecursiveBacktracking(Solver):
    """
    Depth-first search that un-marks dead branches on the way back, so only
    the entry->goal path stays visited.
    """
    # Tie-break order for which branch is explored first
    ORDER = (Grid.SOUTH, Grid.EAST, Grid.NORTH, Grid.WEST)

    def try_enter(self, row: int, col: int) -> bool:
        if self.grid.is_wall(row, col) or self.grid.is_visited(row, col):
            return False
        self.grid.set_visited(row, col)
        self.visited_count += 1
        return True

    def run(self, start: Position, end: Position) -> Iterator[str]:
        grid = self.grid
        if not self.try_enter(*start):
            yield "No Path"
            return
        if start == end:
            self.path = [start]
            yield "Solved"
            return

        # Frame: [position, next direction index]
        stack: List[list] = [[start, 0]]
        found = False
        count = 0

        while stack:
            frame = stack[-1]
            (row, col), i = frame

            if i == len(self.ORDER):
                # Every direction failed, not part of the path
                grid.set_visited(row, col, False)
                stack.pop()
                continue

            frame[1] += 1
            nrow, ncol = Grid.step(row, col, self.ORDER[i])
            if not grid.in_bounds(nrow, ncol) or not self.try_enter(nrow, ncol):
                continue

            if (nrow, ncol) == end:
                found = True
                break
            stack.append([(nrow, ncol), 0])

            count += 1
            if count % self.PROGRESS_INTERVAL == 0:
                yield f"Stack: {len(stack)}"

        if found:
            self.path = [pos for pos, _ in stack] + [end]
            yield "Solved"
        else:
            yield "No Path"


class DeadEndFiller(Solver):
    """
    Fills dead ends until only the through-path is left marked visited.
    Works on the whole grid at once and never walks from the entry.
    """

    def live_neighbors(self, row: int, col: int) -> Iterator[Position]:
        for n in self.grid.get_open_neighbors(row, col):
            if self.grid.is_visited(*n):
                yield n

    def run(self, start: Position, end: Position) -> Iterator[str]:
        grid = self.grid
        grid.set_visited(*start)
        grid.set_visited(*end)

        dead_ends: Deque[Tuple[int, int]] = deque()

        for row in range(1, grid.height - 1):
            for col in range(1, grid.width - 1):
                if grid.is_wall(row, col):
                    continue
                if grid.count_open_neighbors(row, col) == 1 and (row, col) not in (start, end):
                    grid.set_visited(row, col, False)
                    dead_ends.append((row, col))
                else:
                    grid.set_visited(row, col)

        yield "Scanning..."

        while dead_ends:
            row, col = dead_ends.popleft()
            self.visited_count += 1

            connector = next(self.live_neighbors(row, col), None)
            if connector is None or connector in (start, end):
                continue

            # The just-filled cell is already unvisited so it is not counted
            remaining = sum(1 for _ in self.live_neighbors(*connector))
            if remaining <= 1:
                grid.set_visited(*connector, False)
                dead_ends.append(connector)

            if self.visited_count % self.PROGRESS_INTERVAL == 0:
                yield f"Filled: {self.visited_count}"

        self.path = trace_path(grid, start, end)
        yield "Solved" if self.path else "No Path"
