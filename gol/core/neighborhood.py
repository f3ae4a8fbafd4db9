"""Moore neighborhood on a bounded grid.

Neighbours outside the grid are absent: they are never counted as alive
and never raise.
"""

from typing import List, Tuple

from .grid import Grid

# Row/col deltas of the 8 surrounding cells, top-left to bottom-right
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def neighbor_coords(row: int, col: int) -> List[Tuple[int, int]]:
    """Get the coordinates of the 8 cells surrounding (row, col).

    Coordinates are not bounds-checked; callers decide how to treat
    positions outside the grid.

    Args:
        row: Cell row
        col: Cell column

    Returns:
        List of (row, col) pairs in NEIGHBOR_OFFSETS order
    """
    return [(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS]


def alive_neighbor_count(grid: Grid, row: int, col: int) -> int:
    """Count living neighbours of a cell.

    Args:
        grid: The grid containing the cell
        row: Cell row
        col: Cell column

    Returns:
        Number of living in-bounds neighbours (0-8)
    """
    count = 0

    for nr, nc in neighbor_coords(row, col):
        cell = grid.get(nr, nc)
        # None means outside the grid
        if cell is not None and cell.alive:
            count += 1

    return count
