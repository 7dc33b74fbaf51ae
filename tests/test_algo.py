import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.grid import Grid
from labyrinth.core.complexity import MazeInspector
from labyrinth.algo.walk import RandomWalk
from labyrinth.algo.prim import PrimsAlgorithm
from labyrinth.algo.division import RecursiveDivision

# class -> starts as solid wall
GENERATORS = [
    (RandomWalk, True),
    (PrimsAlgorithm, True),
    (RecursiveDivision, False),
]

SIZES = [(3, 3), (3, 9), (9, 3), (5, 5), (11, 15), (21, 21)]


def generate(cls, walls, h, w, seed):
    grid = Grid(h, w, walls=walls)
    entry, goal = (1, 0), (h - 2, w - 1)
    algo = cls(grid, entry, goal, seed=seed)
    algo.run_all()
    return grid, entry, goal


class TestGenerators(unittest.TestCase):
    def test_perfect_maze(self):
        for cls, walls in GENERATORS:
            for h, w in SIZES:
                for seed in range(5):
                    with self.subTest(algo=cls.__name__, size=(h, w), seed=seed):
                        grid, entry, goal = generate(cls, walls, h, w, seed)
                        self.assertTrue(MazeInspector.is_perfect(grid))

    def test_border(self):
        for cls, walls in GENERATORS:
            for h, w in SIZES:
                with self.subTest(algo=cls.__name__, size=(h, w)):
                    grid, entry, goal = generate(cls, walls, h, w, seed=3)
                    self.assertTrue(MazeInspector.border_is_sealed(grid, entry, goal))
                    self.assertFalse(grid.is_wall(*entry))
                    self.assertFalse(grid.is_wall(*goal))

    def test_lattice_points_stay_walls(self):
        for cls, walls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid, _, _ = generate(cls, walls, 15, 19, seed=11)
                for row in range(0, grid.height, 2):
                    for col in range(0, grid.width, 2):
                        self.assertTrue(grid.is_wall(row, col), f"({row}, {col}) is open")

    def test_every_node_reached(self):
        # All odd/odd cells belong to the tree
        for cls, walls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid, _, _ = generate(cls, walls, 13, 17, seed=5)
                for row in range(1, grid.height, 2):
                    for col in range(1, grid.width, 2):
                        self.assertFalse(grid.is_wall(row, col))

    def test_walk_clears_visited(self):
        grid, _, _ = generate(RandomWalk, True, 21, 21, seed=1)
        self.assertFalse(any(grid.is_visited(r, c) for r, c in grid.positions()))

    def test_determinism(self):
        for cls, walls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid1, _, _ = generate(cls, walls, 15, 15, seed=12345)

                grid2 = Grid(15, 15, walls=walls)
                algo = cls(grid2, (1, 0), (13, 14), rng=random.Random(12345))
                for _ in algo.run(): pass

                self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_seeds_differ(self):
        grid1, _, _ = generate(PrimsAlgorithm, True, 31, 31, seed=1)
        grid2, _, _ = generate(PrimsAlgorithm, True, 31, 31, seed=2)
        self.assertNotEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_progress_updates(self):
        grid = Grid(41, 41)
        updates = list(RandomWalk(grid, (1, 0), (39, 40), seed=0).run())
        self.assertEqual(updates[-1], "Done")
        self.assertTrue(any(u.startswith("Carving") for u in updates))

    def test_large_walk_has_no_depth_limit(self):
        # Well past the default interpreter recursion limit
        grid, _, _ = generate(RandomWalk, True, 201, 201, seed=9)
        self.assertEqual(MazeInspector.count_components(grid), 1)

    def test_division_walls_have_one_hole(self):
        grid, _, _ = generate(RecursiveDivision, False, 5, 5, seed=0)
        # The only possible split of a 5x5 is row 2
        holes = [col for col in range(1, 4) if not grid.is_wall(2, col)]
        self.assertEqual(len(holes), 1)
        self.assertEqual(holes[0] % 2, 1)

if __name__ == '__main__':
    unittest.main()
