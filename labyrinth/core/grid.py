from array import array
from typing import Iterator, Tuple

MIN_SIZE = 3


class MazeSizeError(ValueError):
    """Raised when a grid is requested below the 3x3 minimum."""


class Grid:
    # Cell flags
    WALL    = 0b00000001
    VISITED = 0b00000010

    # Direction Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)

    # Direction Helpers (row/col offsets)
    DR = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DC = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('height', 'width', 'cells')

    def __init__(self, height: int, width: int, walls: bool = True):
        if height < MIN_SIZE or width < MIN_SIZE:
            raise MazeSizeError(
                f"Grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {height}x{width}")
        self.height = height
        self.width = width
        # 1 byte per cell, row-major
        fill = self.WALL if walls else 0
        self.cells = array('B', [fill] * (height * width))

    @staticmethod
    def step(row: int, col: int, direction: int, distance: int = 1) -> Tuple[int, int]:
        """Coordinate reached by moving `distance` cells in `direction`."""
        return (row + Grid.DR[direction] * distance,
                col + Grid.DC[direction] * distance)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_interior(self, row: int, col: int) -> bool:
        return 0 < row < self.height - 1 and 0 < col < self.width - 1

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def is_wall(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.WALL) != 0

    def set_wall(self, row: int, col: int, wall: bool = True):
        idx = self.get_index(row, col)
        if wall:
            self.cells[idx] |= self.WALL
        else:
            self.cells[idx] &= ~self.WALL

    def is_visited(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.VISITED) != 0

    def set_visited(self, row: int, col: int, visited: bool = True):
        idx = self.get_index(row, col)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def clear_visited(self):
        mask = ~self.VISITED & 0xFF
        for i in range(len(self.cells)):
            self.cells[i] &= mask

    def positions(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def get_neighbors(self, row: int, col: int, distance: int = 1) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction) for every in-bounds cell `distance` steps away.
        Does NOT check walls.
        """
        for direction in self.DIRECTIONS:
            nrow, ncol = self.step(row, col, direction, distance)
            if self.in_bounds(nrow, ncol):
                yield (nrow, ncol, direction)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for adjacent cells that are not walls.
        """
        for nrow, ncol, _ in self.get_neighbors(row, col):
            if not self.cells[nrow * self.width + ncol] & self.WALL:
                yield (nrow, ncol)

    def count_open_neighbors(self, row: int, col: int) -> int:
        return sum(1 for _ in self.get_open_neighbors(row, col))
