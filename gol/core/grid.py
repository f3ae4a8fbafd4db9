"""Grid state model for Conway's Game of Life.

A generation is an immutable snapshot: the grid stores cell states in a
read-only numpy boolean array and every mutation returns a new Grid. Cells
are materialised on lookup, so a Cell's row/col always match the position
it was read from.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

# Reference world size
DEFAULT_ROWS = 50
DEFAULT_COLS = 50


@dataclass(frozen=True)
class Cell:
    """A single cell of a generation."""
    row: int
    col: int
    alive: bool


class Grid:
    """Fixed-size, bounded 2D grid of cells.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        state: Read-only 2D numpy boolean array (True=alive, False=dead)
    """

    def __init__(self, rows: int, cols: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            rows: Grid height (cells)
            cols: Grid width (cells)
            initial_state: Optional boolean array of shape (rows, cols)

        Raises:
            ValueError: If dimensions are invalid or initial_state doesn't match
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        if initial_state is not None:
            if initial_state.shape != (rows, cols):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(rows, cols)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            state = initial_state.copy()
        else:
            state = np.zeros((rows, cols), dtype=bool)

        state.flags.writeable = False
        self._state = state

    @classmethod
    def empty(cls, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> 'Grid':
        """Create a grid with every cell dead."""
        logger.debug(f"Created empty grid {rows}x{cols}")
        return cls(rows, cols)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Grid':
        """Create grid from a 2D array, coercing it to booleans."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim}D")
        rows, cols = array.shape
        return cls(rows, cols, array.astype(bool))

    @property
    def state(self) -> np.ndarray:
        return self._state

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Get the cell at coordinates.

        Args:
            row: Row index
            col: Column index

        Returns:
            The Cell, or None when (row, col) is outside the grid
        """
        if not self.in_bounds(row, col):
            return None
        return Cell(row, col, bool(self._state[row, col]))

    def set_alive(self, row: int, col: int, alive: bool) -> 'Grid':
        """Return a copy of the grid with one cell's state replaced.

        Out-of-bounds writes are dropped and the same grid is returned, so
        patterns may be placed partially outside the world.

        Args:
            row: Row index
            col: Column index
            alive: New state of the cell

        Returns:
            New grid, or this grid when (row, col) is out of bounds
        """
        if not self.in_bounds(row, col):
            logger.debug(f"Dropped write at ({row}, {col}) outside {self.rows}x{self.cols} grid")
            return self

        state = self._state.copy()
        state[row, col] = alive
        return Grid(self.rows, self.cols, state)

    def row(self, row: int) -> Tuple[Cell, ...]:
        """Get all cells of one row, left to right."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} out of bounds for {self.rows}x{self.cols} grid")
        return tuple(Cell(row, col, bool(alive)) for col, alive in enumerate(self._state[row]))

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self:
            yield from row

    def alive_cells(self) -> Iterator[Cell]:
        """Iterate over live cells in row-major order."""
        for row, col in zip(*np.nonzero(self._state)):
            yield Cell(int(row), int(col), True)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self._state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._state)

    def to_array(self) -> np.ndarray:
        """Get a writable copy of the cell states."""
        return self._state.copy()

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        for row in range(self.rows):
            yield self.row(row)

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows == other.rows and
                self.cols == other.cols and
                np.array_equal(self._state, other._state))

    def __hash__(self) -> int:
        return hash((self.rows, self.cols, self._state.tobytes()))

    def __str__(self) -> str:
        """Text frame of the grid, one line per row."""
        alive_char = '█'
        dead_char = '░'
        return '\n'.join(
            ''.join(alive_char if alive else dead_char for alive in row)
            for row in self._state
        )

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, alive={self.count_alive()})"


def empty_grid(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Grid:
    """Create a grid of the given size with every cell dead."""
    return Grid.empty(rows, cols)


def get(grid: Grid, row: int, col: int) -> Optional[Cell]:
    """Look up a cell; None when out of bounds."""
    return grid.get(row, col)


def set_alive(grid: Grid, row: int, col: int, alive: bool) -> Grid:
    """Return a grid with (row, col) set to `alive`; out-of-bounds is a no-op."""
    return grid.set_alive(row, col, alive)


def place(grid: Grid, row: int, col: int) -> Grid:
    """Return a grid with (row, col) alive; out-of-bounds is a no-op."""
    return grid.set_alive(row, col, True)


def is_alive(grid: Grid, row: int, col: int) -> bool:
    """Check whether a cell is alive. Cells outside the grid are never alive."""
    cell = grid.get(row, col)
    return cell is not None and cell.alive
