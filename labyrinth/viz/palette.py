import numpy as np

COLOR_ENTRY   = (200, 40, 40)   # Red
COLOR_GOAL    = (40, 170, 60)   # Green
COLOR_WALL    = (200, 200, 200)
COLOR_PATH    = (60, 100, 160)  # Blue tint
COLOR_OPEN    = (10, 10, 10)


def cell_color(cell):
    """Colour for a CellInfo; entry/goal win over wall/visited."""
    if cell.is_entry:
        return COLOR_ENTRY
    if cell.is_goal:
        return COLOR_GOAL
    if cell.is_wall:
        return COLOR_WALL
    if cell.is_visited:
        return COLOR_PATH
    return COLOR_OPEN


def to_rgb(maze) -> np.ndarray:
    """
    (height, width, 3) uint8 image of the maze, one pixel per cell.
    Reads through Maze.cell_at only.
    """
    img = np.empty((maze.height, maze.width, 3), dtype=np.uint8)
    for row in range(maze.height):
        for col in range(maze.width):
            img[row, col] = cell_color(maze.cell_at(row, col))
    return img
