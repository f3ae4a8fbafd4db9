"""Generation stepping for Conway's Game of Life.

Every cell of the next generation is computed from the input generation
only, and the result is assembled into a fresh Grid.
"""

import numpy as np
from typing import Iterator, Optional
import logging

from .grid import Grid
from .neighborhood import alive_neighbor_count
from .conway_rules import next_state

logger = logging.getLogger(__name__)


def step(grid: Grid) -> Grid:
    """Apply one generation of Conway's rules to the entire grid.

    Args:
        grid: Current generation (not modified)

    Returns:
        New grid holding the next generation
    """
    new_state = np.zeros(grid.shape, dtype=bool)

    for cell in grid.cells():
        neighbors = alive_neighbor_count(grid, cell.row, cell.col)
        new_state[cell.row, cell.col] = next_state(cell.alive, neighbors)

    return Grid(grid.rows, grid.cols, new_state)


def evolve(grid: Grid, generations: Optional[int] = None) -> Iterator[Grid]:
    """Iterate over successive generations.

    Yields the starting grid first, then one grid per step.

    Args:
        grid: Starting generation
        generations: Number of steps to take (None for unbounded)

    Raises:
        ValueError: If generations is negative
    """
    if generations is not None and generations < 0:
        raise ValueError(f"Generation count cannot be negative, got {generations}")

    current = grid
    yield current

    taken = 0
    while generations is None or taken < generations:
        current = step(current)
        taken += 1
        if taken % 100 == 0:
            logger.debug(f"Generation {taken}: alive={current.count_alive()}")
        yield current
