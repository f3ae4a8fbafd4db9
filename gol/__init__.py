"""
Conway's Game of Life on a bounded grid.

Collaborators (seeders, renderers) use this interface:
empty_grid, place, is_alive and step.
"""

from .core import Cell, Grid, empty_grid, place, is_alive, step

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Grid',
    'empty_grid',
    'place',
    'is_alive',
    'step',
]
