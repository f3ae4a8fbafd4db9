"""Pygame renderer for Game of Life generations.

The renderer owns the current generation. Each frame it draws that
generation, then replaces it with the next one from the stepper.
"""

import pygame
from typing import Optional, Tuple
import logging

from ..core.grid import Cell, Grid
from ..core.stepper import step
from .config import Color, RenderConfig

logger = logging.getLogger(__name__)


def cell_color(cell: Cell, config: RenderConfig) -> Color:
    """Fill colour for a cell: foreground when alive, background when dead."""
    return config.alive_color if cell.alive else config.dead_color


def cell_rect(cell: Cell, config: RenderConfig) -> Tuple[int, int, int, int]:
    """Screen rectangle (x, y, width, height) covered by a cell."""
    return (cell.col * config.cell_width,
            cell.row * config.cell_height,
            config.cell_width,
            config.cell_height)


def draw_grid(surface: pygame.Surface, grid: Grid, config: RenderConfig) -> None:
    """Draw every cell of a generation onto a surface.

    Args:
        surface: Target surface (window or off-screen)
        grid: Generation to draw
        config: Colours and cell size
    """
    surface.fill(config.dead_color)
    for cell in grid.cells():
        pygame.draw.rect(surface, cell_color(cell, config), pygame.Rect(cell_rect(cell, config)))


class LifeRenderer:
    """Draws successive generations, stepping once per frame.

    Attributes:
        grid: Generation drawn by the next frame
        config: Display configuration
        generation: Number of steps taken so far
    """

    def __init__(self, grid: Grid, config: Optional[RenderConfig] = None):
        """Initialize renderer.

        Args:
            grid: Initial (seeded) generation
            config: Display configuration (defaults if None)
        """
        self.grid = grid
        self.config = config or RenderConfig()
        self.generation = 0

        if self.config.grid_shape != grid.shape:
            logger.warning(f"Grid {grid.rows}x{grid.cols} does not match window capacity "
                           f"{self.config.grid_shape[0]}x{self.config.grid_shape[1]}")

    def advance(self) -> Grid:
        """Replace the current generation with the next one."""
        self.grid = step(self.grid)
        self.generation += 1
        return self.grid

    def render_frame(self, surface: pygame.Surface) -> None:
        """Draw the current generation, then advance to the next."""
        draw_grid(surface, self.grid, self.config)
        self.advance()

    def run(self, max_frames: Optional[int] = None) -> int:
        """Open a window and animate until closed.

        Args:
            max_frames: Stop after this many frames (None to run until closed)

        Returns:
            Number of frames drawn
        """
        pygame.init()
        try:
            pygame.display.set_caption(self.config.title)
            screen = pygame.display.set_mode(self.config.window_size)
            clock = pygame.time.Clock()
            logger.info(f"Rendering {self.grid.rows}x{self.grid.cols} grid at {self.config.fps} fps")

            frames = 0
            running = True
            while running and (max_frames is None or frames < max_frames):
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                if not running:
                    break

                self.render_frame(screen)
                pygame.display.flip()
                frames += 1
                clock.tick(self.config.fps)

            logger.info(f"Renderer stopped after {frames} frames (alive={self.grid.count_alive()})")
            return frames
        finally:
            pygame.quit()
