"""Pygame rendering of Game of Life generations."""

from .config import RenderConfig
from .renderer import LifeRenderer, cell_color, cell_rect, draw_grid

__all__ = [
    'RenderConfig',
    'LifeRenderer',
    'cell_color',
    'cell_rect',
    'draw_grid',
]
