import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
from rich.console import Console

from labyrinth.maze import construct, GenerationKind, SolvingKind, CellInfo
from labyrinth.viz import palette, terminal

class TestPalette(unittest.TestCase):
    def test_priority(self):
        self.assertEqual(palette.cell_color(CellInfo(False, True, True, False)), palette.COLOR_ENTRY)
        self.assertEqual(palette.cell_color(CellInfo(False, True, False, True)), palette.COLOR_GOAL)
        self.assertEqual(palette.cell_color(CellInfo(True, False, False, False)), palette.COLOR_WALL)
        self.assertEqual(palette.cell_color(CellInfo(False, True, False, False)), palette.COLOR_PATH)
        self.assertEqual(palette.cell_color(CellInfo(False, False, False, False)), palette.COLOR_OPEN)

    def test_to_rgb(self):
        maze = construct(9, 11, GenerationKind.PRIM, seed=1)
        maze.solve(SolvingKind.RECURSIVE_BACKTRACKING)
        img = palette.to_rgb(maze)

        self.assertEqual(img.shape, (9, 11, 3))
        self.assertEqual(img.dtype, np.uint8)
        self.assertEqual(tuple(img[1, 0]), palette.COLOR_ENTRY)
        self.assertEqual(tuple(img[7, 10]), palette.COLOR_GOAL)
        self.assertEqual(tuple(img[0, 0]), palette.COLOR_WALL)

        path_pixels = np.all(img == palette.COLOR_PATH, axis=-1).sum()
        # Entry and goal are drawn in their own colours
        self.assertEqual(path_pixels, len(maze.path()) - 2)

class TestTerminal(unittest.TestCase):
    def test_build_text(self):
        maze = construct(5, 7, GenerationKind.RANDOM_WALK, seed=2)
        text = terminal.build_text(maze)
        lines = text.plain.split("\n")
        self.assertEqual(len(lines), 5)
        for line in lines:
            self.assertEqual(len(line), 7 * len(terminal.GLYPH))

    def test_styles(self):
        self.assertEqual(terminal.cell_style(CellInfo(False, False, True, False)), terminal.STYLE_ENTRY)
        self.assertEqual(terminal.cell_style(CellInfo(True, False, False, False)), terminal.STYLE_WALL)
        self.assertEqual(terminal.cell_style(CellInfo(False, True, False, False)), terminal.STYLE_PATH)

    def test_render(self):
        maze = construct(5, 5, GenerationKind.RECURSIVE_DIVISION, seed=0)
        buf = io.StringIO()
        console = Console(file=buf, width=200, force_terminal=True, color_system="standard")
        terminal.render(maze, console=console)
        out = buf.getvalue()
        self.assertIn("\x1b[", out)
        self.assertEqual(out.count("\n"), 5)

class TestRenderer(unittest.TestCase):
    def test_headless_keys(self):
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        import pygame
        from labyrinth.viz.renderer import Renderer

        maze = construct(11, 11, GenerationKind.PRIM, seed=5)
        renderer = Renderer(maze, regenerate=lambda: construct(7, 7, GenerationKind.RANDOM_WALK, seed=1),
                            width=320, height=240)
        try:
            renderer.init_window()
        except pygame.error as e:
            self.skipTest(f"No display available: {e}")

        try:
            renderer.handle_key(pygame.K_2)
            self.assertTrue(maze.is_solved())
            self.assertEqual(renderer.status, "Solved (deadend)")

            renderer.handle_key(pygame.K_u)
            self.assertFalse(maze.is_solved())

            renderer.handle_key(pygame.K_r)
            self.assertEqual(renderer.maze.dimensions, (7, 7))
            self.assertEqual(renderer.maze_surface.get_size(), (7, 7))

            renderer.draw_maze()
            renderer.draw_hud()

            renderer.handle_key(pygame.K_q)
            self.assertFalse(renderer.running)
        finally:
            pygame.quit()

if __name__ == '__main__':
    unittest.main()
