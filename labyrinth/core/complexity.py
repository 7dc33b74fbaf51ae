from collections import deque
from typing import Iterable, Tuple
from labyrinth.core.grid import Grid


class MazeInspector:
    @staticmethod
    def calculate_stats(grid: Grid):
        open_cells = 0
        passages = 0  # adjacent open pairs, each counted once
        dead_ends = 0  # 1 open neighbour
        corridors = 0  # 2 open neighbours
        junctions = 0  # 3+ open neighbours

        for row, col in grid.positions():
            if grid.is_wall(row, col):
                continue
            open_cells += 1

            degree = grid.count_open_neighbors(row, col)
            if degree == 1: dead_ends += 1
            elif degree == 2: corridors += 1
            elif degree >= 3: junctions += 1

            # Count only south/east links so each pair is seen once
            if row + 1 < grid.height and not grid.is_wall(row + 1, col):
                passages += 1
            if col + 1 < grid.width and not grid.is_wall(row, col + 1):
                passages += 1

        total = grid.width * grid.height
        return {
            "open_cells": open_cells,
            "walls": total - open_cells,
            "passages": passages,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / open_cells) * 100 if open_cells > 0 else 0
        }

    @staticmethod
    def count_components(grid: Grid) -> int:
        seen = set()
        components = 0
        for pos in grid.positions():
            if pos in seen or grid.is_wall(*pos):
                continue
            components += 1
            seen.add(pos)
            queue = deque([pos])
            while queue:
                current = queue.popleft()
                for n in grid.get_open_neighbors(*current):
                    if n not in seen:
                        seen.add(n)
                        queue.append(n)
        return components

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Open cells form a spanning tree: one component and
        exactly (open cells - 1) passages.
        """
        stats = MazeInspector.calculate_stats(grid)
        return (MazeInspector.count_components(grid) == 1
                and stats["passages"] == stats["open_cells"] - 1)

    @staticmethod
    def border_is_sealed(grid: Grid, entry: Tuple[int, int], goal: Tuple[int, int]) -> bool:
        for row, col in grid.positions():
            if grid.is_interior(row, col) or (row, col) in (entry, goal):
                continue
            if not grid.is_wall(row, col):
                return False
        return True

    @staticmethod
    def is_connected_path(grid: Grid, cells: Iterable[Tuple[int, int]],
                          start: Tuple[int, int], end: Tuple[int, int]) -> bool:
        """
        True when `cells` are all open and link start to end through
        cardinal moves that stay inside the set.
        """
        cells = set(cells)
        if start not in cells or end not in cells:
            return False
        if any(grid.is_wall(*pos) for pos in cells):
            return False

        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return True
            for n in grid.get_open_neighbors(*current):
                if n in cells and n not in seen:
                    seen.add(n)
                    queue.append(n)
        return False
