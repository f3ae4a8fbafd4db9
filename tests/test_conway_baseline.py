"""
Conway baseline behaviour of the stepper.

Checks synchronous update on known still lifes, oscillators and
spaceships on a bounded grid.
"""

import pytest
import numpy as np
from gol.core.grid import Grid, empty_grid, place, is_alive
from gol.core.stepper import step, evolve
from gol.core.neighborhood import alive_neighbor_count
from gol.core.conway_rules import next_state
from gol.patterns.library import BLINKER, BLOCK, GLIDER, GOSPER_GLIDER_GUN, seed


def alive_set(grid):
    return {(cell.row, cell.col) for cell in grid.alive_cells()}


def in_place_step(grid):
    """Row-major update that overwrites cells as it goes."""
    state = grid.to_array()
    for r in range(grid.rows):
        for c in range(grid.cols):
            current = Grid(grid.rows, grid.cols, state)
            state[r, c] = next_state(bool(state[r, c]), alive_neighbor_count(current, r, c))
    return Grid(grid.rows, grid.cols, state)


class TestConwayBaseline:
    """Test fundamental Conway behaviours."""

    def test_isolated_cell_dies(self):
        """A single live cell dies of underpopulation."""
        grid = place(empty_grid(5, 5), 2, 2)
        assert step(grid).is_empty()

    def test_block_stable_still_life(self):
        """2x2 block is unchanged over many generations."""
        grid = seed(empty_grid(6, 6), BLOCK, 2, 2)

        current = grid
        for generation in range(20):
            current = step(current)
            assert current == grid, f"Block unstable at generation {generation}"

    def test_block_in_corner_stable(self):
        """Grid edges do not disturb a block touching them."""
        grid = seed(empty_grid(4, 4), BLOCK, 0, 0)
        assert step(grid) == grid

    def test_blinker_oscillates_period_2(self):
        """Horizontal blinker turns vertical, then back."""
        r, c = 4, 4
        grid = empty_grid(9, 9)
        for col in (c - 1, c, c + 1):
            grid = place(grid, r, col)

        once = step(grid)
        assert alive_set(once) == {(r - 1, c), (r, c), (r + 1, c)}

        twice = step(once)
        assert twice == grid

    def test_glider_translates(self):
        """Glider moves one cell down and right every 4 generations."""
        grid = seed(empty_grid(20, 20), GLIDER, 2, 2)

        current = grid
        for _ in range(4):
            current = step(current)
            assert current.count_alive() == 5

        assert current == seed(empty_grid(20, 20), GLIDER, 3, 3)

    def test_gosper_gun_emits_gliders(self):
        """Population grows by a glider every 30 generations."""
        grid = seed(empty_grid(50, 50), GOSPER_GLIDER_GUN, 10, 5)

        generations = list(evolve(grid, 60))
        counts = [generations[n].count_alive() for n in (0, 30, 60)]

        assert counts[0] == 36
        assert counts[0] < counts[1] < counts[2]

    def test_empty_grid_stays_empty(self):
        """Empty grid remains empty."""
        grid = empty_grid(10, 10)
        for current in evolve(grid, 10):
            assert current.is_empty()


class TestStepSemantics:
    """Test purity and synchronous update."""

    def test_step_deterministic(self):
        """Equal inputs give equal outputs."""
        rng = np.random.default_rng(42)
        state = rng.random((12, 12)) < 0.4

        a = Grid(12, 12, state)
        b = Grid(12, 12, state)
        assert step(a) == step(b)

    def test_step_does_not_modify_input(self):
        """The input generation is left untouched."""
        grid = seed(empty_grid(6, 6), GLIDER, 1, 1)
        before = grid.to_array()

        step(grid)
        np.testing.assert_array_equal(grid.state, before)

    def test_synchronous_update(self):
        """Every cell reads only the previous generation.

        A blinker filling the middle row of a 3x3 grid turns vertical only
        when births in the top row are kept out of the middle row's counts.
        Writing results back into the same array, row by row, lets (0, 1)
        keep (1, 0) and (1, 2) alive and never reaches the vertical phase.
        """
        grid = seed(empty_grid(3, 3), BLINKER, 1, 0)

        nxt = step(grid)
        assert alive_set(nxt) == {(0, 1), (1, 1), (2, 1)}
        assert nxt != in_place_step(grid)

    def test_step_preserves_dimensions(self):
        """Output grid has the input's shape."""
        grid = place(empty_grid(3, 7), 1, 1)
        assert step(grid).shape == (3, 7)

    def test_evolve_counts(self):
        """evolve yields the start plus one grid per step."""
        grid = empty_grid(3, 3)
        assert len(list(evolve(grid, 5))) == 6
        assert list(evolve(grid, 0)) == [grid]

    def test_evolve_unbounded(self):
        """evolve without a limit keeps producing generations."""
        generator = evolve(place(empty_grid(3, 3), 1, 1))
        first, second = next(generator), next(generator)

        assert is_alive(first, 1, 1)
        assert second.is_empty()

    def test_evolve_negative(self):
        """Negative generation counts are rejected."""
        with pytest.raises(ValueError, match="cannot be negative"):
            list(evolve(empty_grid(3, 3), -1))
