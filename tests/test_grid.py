"""Tests for the Grid module."""

import numpy as np
import pytest

from classic_snake.grid import CellType, Grid, WallMode


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cell_count == 400

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(0)
        with pytest.raises(ValueError, match="positive"):
            Grid(-3)

    def test_wall_mode_values(self):
        assert WallMode("walls") is WallMode.WALLS
        assert WallMode("pass_through") is WallMode.PASS_THROUGH


class TestGridGeometry:
    def test_in_bounds(self):
        grid = Grid(5)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 4)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, 5)
        assert not grid.in_bounds(5, 0)

    def test_wrap(self):
        grid = Grid(5)
        assert grid.wrap(-1, 0) == (4, 0)
        assert grid.wrap(0, -1) == (0, 4)
        assert grid.wrap(5, 5) == (0, 0)
        assert grid.wrap(2, 3) == (2, 3)


class TestGridPaint:
    def test_paint_marks_cells(self):
        grid = Grid(5)
        board = grid.paint([(2, 2), (2, 1), (2, 0)], food=(0, 4))
        assert board.shape == (5, 5)
        assert board[2, 2] == CellType.HEAD
        assert board[2, 1] == CellType.SNAKE
        assert board[2, 0] == CellType.SNAKE
        assert board[0, 4] == CellType.FOOD
        assert np.count_nonzero(board) == 4

    def test_paint_empty(self):
        board = Grid(4).paint([])
        assert np.all(board == CellType.EMPTY)
