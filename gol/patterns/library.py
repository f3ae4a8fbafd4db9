"""Seed patterns for Conway's Game of Life.

Patterns are stored as (row, col) offsets of their live cells relative to
the pattern's top-left corner. Seeding places them through the grid's
`place` contract, so any part of a pattern that falls outside the world
is silently dropped.
"""

from typing import Dict, Iterable, Tuple
import logging

from ..core.grid import Grid, empty_grid, place, DEFAULT_ROWS, DEFAULT_COLS

logger = logging.getLogger(__name__)

Pattern = Tuple[Tuple[int, int], ...]

# Period-2 oscillator, horizontal phase
BLINKER: Pattern = ((0, 0), (0, 1), (0, 2))

# 2x2 still life
BLOCK: Pattern = ((0, 0), (0, 1), (1, 0), (1, 1))

# Moves one cell down and right every 4 generations
GLIDER: Pattern = ((0, 1), (1, 2), (2, 0), (2, 1), (2, 2))

# Period-30 gun emitting gliders towards the bottom right
GOSPER_GLIDER_GUN: Pattern = (
    (0, 24),
    (1, 22), (1, 24),
    (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
    (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
    (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
    (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
    (6, 10), (6, 16), (6, 24),
    (7, 11), (7, 15),
    (8, 12), (8, 13),
)

PATTERNS: Dict[str, Pattern] = {
    "blinker": BLINKER,
    "block": BLOCK,
    "glider": GLIDER,
    "gun": GOSPER_GLIDER_GUN,
}

# Where the start-up world places each pattern (top-left corner)
DEFAULT_LAYOUT: Tuple[Tuple[Pattern, int, int], ...] = (
    (BLINKER, 12, 5),
    (BLOCK, 15, 10),
    (GLIDER, 18, 20),
    (GOSPER_GLIDER_GUN, 1, 1),
)


def pattern_size(pattern: Pattern) -> Tuple[int, int]:
    """Get (height, width) of a pattern's bounding box."""
    height = max(r for r, _ in pattern) + 1
    width = max(c for _, c in pattern) + 1
    return (height, width)


def get_pattern(name: str) -> Pattern:
    """Look up a pattern by name.

    Raises:
        ValueError: If no pattern has that name
    """
    try:
        return PATTERNS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern '{name}', expected one of {sorted(PATTERNS)}") from None


def seed(grid: Grid, pattern: Iterable[Tuple[int, int]], row: int = 0, col: int = 0) -> Grid:
    """Place a pattern with its top-left corner at (row, col).

    Args:
        grid: Grid to seed (not modified)
        pattern: (row, col) offsets of live cells
        row: Row of the pattern's top-left corner
        col: Column of the pattern's top-left corner

    Returns:
        New grid with the pattern's in-bounds cells alive
    """
    for dr, dc in pattern:
        grid = place(grid, row + dr, col + dc)
    return grid


def default_world(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Grid:
    """Build the start-up world: blinker, block, glider and Gosper glider gun."""
    grid = empty_grid(rows, cols)
    for pattern, row, col in DEFAULT_LAYOUT:
        grid = seed(grid, pattern, row, col)

    logger.debug(f"Seeded default world {rows}x{cols} with {grid.count_alive()} live cells")
    return grid
