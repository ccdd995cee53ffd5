"""
Tests for the board model.

Covers cell access, placement rules, and win / full detection.
"""

import pytest

from tictactoe_cli.board import Board
from tictactoe_cli.types import Mark, OutOfBoundsError


class TestCellAccess:
    """Tests for get/set on individual cells."""

    def test_new_board_is_empty(self):
        """A fresh board has nine empty cells."""
        board = Board()
        assert board.cells == tuple([Mark.EMPTY] * 9)
        assert len(board.empty_cells()) == 9

    @pytest.mark.parametrize("col", range(3))
    @pytest.mark.parametrize("row", range(3))
    def test_set_then_get(self, col, row):
        """Placing on an empty cell succeeds and is visible through get."""
        board = Board()
        assert board.set(col, row, Mark.X)
        assert board.get(col, row) == Mark.X

    def test_set_never_overwrites(self):
        """A second placement on the same cell fails and keeps the first mark."""
        board = Board()
        assert board.set(1, 1, Mark.O)
        assert not board.set(1, 1, Mark.X)
        assert not board.set(1, 1, Mark.O)
        assert board.get(1, 1) == Mark.O

    def test_set_touches_one_cell(self):
        """Only the addressed cell changes."""
        board = Board()
        board.set(2, 0, Mark.X)
        assert board.cells.count(Mark.X) == 1
        assert board.cells[2] == Mark.X

    def test_linear_index(self):
        """Cells are stored at col + row * 3."""
        board = Board()
        board.set(0, 2, Mark.O)
        assert board.cells[6] == Mark.O

    @pytest.mark.parametrize("col,row", [(3, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
    def test_out_of_bounds_is_a_fault(self, col, row):
        """Coordinates outside 0-2 raise OutOfBoundsError."""
        board = Board()
        with pytest.raises(OutOfBoundsError):
            board.get(col, row)
        with pytest.raises(OutOfBoundsError):
            board.set(col, row, Mark.X)

    def test_out_of_bounds_is_an_index_error(self):
        """Out-of-bounds faults are IndexErrors that name the coordinate."""
        with pytest.raises(IndexError, match="Column out of bounds: 3"):
            Board().get(3, 1)

    def test_wrong_cell_count_rejected(self):
        """A board needs exactly nine cells."""
        with pytest.raises(ValueError):
            Board([Mark.EMPTY] * 8)

    def test_not_hashable(self):
        """Boards compare by contents but cannot be used as dict keys."""
        assert Board() == Board()
        with pytest.raises(TypeError):
            hash(Board())

    def test_empty_cells_coordinates(self, board_from_rows):
        """empty_cells lists (col, row) pairs."""
        board = board_from_rows("XOX", "OXO", "OX ")
        assert board.empty_cells() == [(2, 0)]


class TestWinDetection:
    """Tests for is_won."""

    @pytest.mark.parametrize("line", Board.WIN_LINES)
    @pytest.mark.parametrize("mark", [Mark.X, Mark.O])
    def test_every_line_wins(self, line, mark):
        """Three identical marks on any of the eight lines is a win."""
        cells = [Mark.EMPTY] * 9
        for i in line:
            cells[i] = mark
        assert Board(cells).is_won()

    def test_eight_lines(self):
        """There are three rows, three columns and two diagonals."""
        assert len(Board.WIN_LINES) == 8

    def test_empty_board_not_won(self):
        """An empty board has no winner."""
        assert not Board().is_won()

    def test_mixed_marks_not_won(self, board_from_rows):
        """Scattered marks with no line are not a win."""
        board = board_from_rows("XO ", " X ", "O O")
        assert not board.is_won()

    def test_line_of_mixed_marks_not_won(self, board_from_rows):
        """A filled line of different marks is not a win."""
        board = board_from_rows("   ", "   ", "XXO")
        assert not board.is_won()

    def test_bottom_row(self):
        """X at (0,0), (1,0), (2,0) wins along the bottom row."""
        board = Board()
        for col in range(3):
            board.set(col, 0, Mark.X)
        assert board.is_won()
        assert not board.is_full()

    def test_full_board_without_line(self, board_from_rows):
        """A full board without a line is full but not won."""
        board = board_from_rows("XOX", "XOO", "OXX")
        assert not board.is_won()
        assert board.is_full()


class TestFullBoard:
    """Tests for is_full."""

    def test_empty_board_not_full(self):
        """An empty board is not full."""
        assert not Board().is_full()

    def test_one_gap_not_full(self, board_from_rows):
        """A single empty cell keeps the board from being full."""
        assert not board_from_rows("XOX", "XO ", "OXX").is_full()

    def test_full_and_won(self, board_from_rows):
        """A full board counts as full even when it also holds a line."""
        board = board_from_rows("XXX", "OOX", "XOO")
        assert board.is_full()
        assert board.is_won()
