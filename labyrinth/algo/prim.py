from typing import Iterator, List, Tuple, Set
from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator


class PrimsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        self.open_endpoints()

        start_row, start_col = self.random_lattice_cell()
        grid.set_wall(start_row, start_col, wall=False)

        # Set for O(1) membership, list for random choice
        frontier_set: Set[Tuple[int, int]] = set()
        frontier_list: List[Tuple[int, int]] = []

        def add_frontiers(row, col):
            for nrow, ncol, _ in grid.get_neighbors(row, col, 2):
                if not grid.is_interior(nrow, ncol) or not grid.is_wall(nrow, ncol):
                    continue
                if (nrow, ncol) not in frontier_set:
                    frontier_set.add((nrow, ncol))
                    frontier_list.append((nrow, ncol))

        add_frontiers(start_row, start_col)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = self.rng.randrange(len(frontier_list))
            row, col = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove((row, col))

            grid.set_wall(row, col, wall=False)

            # Connect to one already-open cell two steps away
            possible_neighbors = []
            for nrow, ncol, direction in grid.get_neighbors(row, col, 2):
                if grid.is_interior(nrow, ncol) and not grid.is_wall(nrow, ncol):
                    possible_neighbors.append(direction)

            direction = self.rng.choice(possible_neighbors)
            wrow, wcol = Grid.step(row, col, direction)
            grid.set_wall(wrow, wcol, wall=False)
            self.step_count += 1

            add_frontiers(row, col)

            if self.step_count % self.PROGRESS_INTERVAL == 0:
                yield f"Frontier: {len(frontier_list)}"

        yield "Done"
