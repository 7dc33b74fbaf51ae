from typing import Iterator, List, Tuple
from labyrinth.algo.base import Generator

# (top, left, bottom, right), all four are wall lines
Region = Tuple[int, int, int, int]


class RecursiveDivision(Generator):
    """
    Starts from an open field and adds walls. Walls go on even indices and
    holes on odd ones, so every split keeps exactly one opening between the
    two halves.

    The grid must be created open (walls=False).
    """

    def run(self) -> Iterator[str]:
        grid = self.grid
        height, width = grid.height, grid.width

        for col in range(width):
            grid.set_wall(0, col)
            grid.set_wall(height - 1, col)
        for row in range(height):
            grid.set_wall(row, 0)
            grid.set_wall(row, width - 1)
        self.open_endpoints()

        stack: List[Region] = [(0, 0, height - 1, width - 1)]

        while stack:
            top, left, bottom, right = stack.pop()
            region_h = bottom - top
            region_w = right - left

            # One cell wide, nothing to split
            if region_h == 2 or region_w == 2:
                continue

            if region_h >= region_w:
                wall_row = self.rng.randrange(top + 2, bottom, 2)
                for col in range(left + 1, right):
                    grid.set_wall(wall_row, col)
                hole_col = self.rng.randrange(left + 1, right, 2)
                grid.set_wall(wall_row, hole_col, wall=False)

                halves = [(top, left, wall_row, right), (wall_row, left, bottom, right)]
            else:
                wall_col = self.rng.randrange(left + 2, right, 2)
                for row in range(top + 1, bottom):
                    grid.set_wall(row, wall_col)
                hole_row = self.rng.randrange(top + 1, bottom, 2)
                grid.set_wall(hole_row, wall_col, wall=False)

                halves = [(top, left, bottom, wall_col), (top, wall_col, bottom, right)]

            # First half is divided before the second
            stack.extend(reversed(halves))
            self.step_count += 1

            if self.step_count % self.PROGRESS_INTERVAL == 0:
                yield f"Dividing... Regions: {len(stack)}"

        yield "Done"
