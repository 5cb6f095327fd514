"""
Tests for gridsnake.grid.Grid.
"""

import random

import pytest

from gridsnake.direction import DOWN, LEFT, RIGHT, UP
from gridsnake.grid import Grid


class TestGrid:
    """Tests for bounds and geometry."""

    def test_default_board_is_twenty_by_twenty(self):
        """A 20x20 grid has exactly 400 cells and spans -10..9 on each axis."""
        grid = Grid(20, 20, cell_size=20)
        assert grid.cell_count == 400
        assert len(list(grid.cells())) == 400
        assert (grid.min_x, grid.max_x) == (-10, 9)
        assert (grid.min_y, grid.max_y) == (-10, 9)
        assert grid.pixel_size == (400, 400)

    def test_bounds(self):
        """Cells from min to max on each axis are inside, anything past them is not."""
        grid = Grid(20, 20)
        assert grid.contains((9, 9))
        assert grid.contains((-10, -10))
        assert not grid.contains((10, 0))
        assert not grid.contains((0, -11))

    def test_odd_size(self):
        """An odd size is symmetric around the origin."""
        grid = Grid(5, 5)
        assert (grid.min_x, grid.max_x) == (-2, 2)
        assert grid.cell_count == 25

    def test_cell_count_matches_cells(self):
        """cells() enumerates every in-bounds cell once."""
        grid = Grid(4, 6)
        cells = list(grid.cells())
        assert len(cells) == grid.cell_count == 4 * 6
        assert len(set(cells)) == len(cells)
        assert all(grid.contains(c) for c in cells)

    def test_step(self):
        """step moves exactly one cell along a direction."""
        grid = Grid()
        assert grid.step((0, 0), UP) == (0, 1)
        assert grid.step((0, 0), DOWN) == (0, -1)
        assert grid.step((0, 0), LEFT) == (-1, 0)
        assert grid.step((0, 0), RIGHT) == (1, 0)

    def test_random_cell_in_bounds(self):
        """Sampled cells are always inside the grid."""
        grid = Grid(6, 6)
        rng = random.Random(5)
        for _ in range(200):
            assert grid.contains(grid.random_cell(rng))

    def test_to_screen_flips_y(self):
        """Screen coordinates put the top-left cell at (0, 0)."""
        grid = Grid(20, 20, cell_size=10)
        assert grid.pixel_size == (200, 200)
        assert grid.to_screen((-10, 9)) == (0, 0)
        assert grid.to_screen((0, 0)) == (100, 90)
        assert grid.to_screen((9, -10)) == (190, 190)

    @pytest.mark.parametrize("args", [(0, 20, 20), (20, -1, 20), (20, 20, 0)])
    def test_rejects_bad_size(self, args):
        with pytest.raises(ValueError):
            Grid(*args)
