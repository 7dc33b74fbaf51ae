import numpy as np
import pygame
from labyrinth.maze import Maze, SolvingKind
from labyrinth.viz.palette import to_rgb


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_TEXT = (255, 255, 255)

    def __init__(self, maze: Maze, regenerate=None, width=1280, height=720):
        """
        regenerate: optional zero-argument callable returning a fresh Maze (bound to R).
        """
        self.maze = maze
        self.regenerate = regenerate
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.maze_surface = None
        self.status = "Unsolved"

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.maze.width
        zoom_y = available_h / self.maze.height

        # Taking minimum zoom to fit both dimensions
        self.cell_size = min(zoom_x, zoom_y)

        total_maze_w = self.maze.width * self.cell_size
        total_maze_h = self.maze.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Labyrinth - {self.maze.height}x{self.maze.width}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.refresh()
        self.fit_to_screen()

    def refresh(self):
        # surfarray wants (width, height, 3)
        self.maze_surface = pygame.surfarray.make_surface(np.ascontiguousarray(to_rgb(self.maze).swapaxes(0, 1)))

    def solve(self, strategy: SolvingKind):
        self.maze.solve(strategy)
        self.status = f"Solved ({strategy.value})" if self.maze.is_solved() else "No Path"
        self.refresh()

    def handle_key(self, key):
        if key == pygame.K_1:
            self.solve(SolvingKind.RECURSIVE_BACKTRACKING)
        elif key == pygame.K_2:
            self.solve(SolvingKind.DEAD_END_FILLING)
        elif key == pygame.K_u:
            self.maze.unsolve()
            self.status = "Unsolved"
            self.refresh()
        elif key == pygame.K_r and self.regenerate:
            self.maze = self.regenerate()
            self.status = "Unsolved"
            self.refresh()
            self.fit_to_screen()
        elif key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                # World coord before zoom
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                self.cell_size = max(1.0, min(100.0, self.cell_size))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_maze(self):
        self.surface.fill(self.COLOR_BG)
        size = (int(self.maze.width * self.cell_size), int(self.maze.height * self.cell_size))
        scaled = pygame.transform.scale(self.maze_surface, size)
        self.surface.blit(scaled, (int(self.offset_x), int(self.offset_y)))

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        info = [
            f"FPS: {fps}",
            f"Size: {self.maze.height}x{self.maze.width} ({self.maze.strategy.value})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {self.status}",
            "1: backtrack  2: dead-end fill  U: clear  R: new maze",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.draw_maze()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
