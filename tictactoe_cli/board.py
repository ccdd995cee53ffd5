"""
Tic-Tac-Toe board.

Cells are addressed by (col, row) with (0, 0) in the bottom-left corner.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from tictactoe_cli.types import Mark, OutOfBoundsError


class Board:
    """A 3x3 grid of marks stored as a flat list, index = col + row * 3."""

    SIZE: ClassVar[int] = 3
    WIN_LINES: ClassVar[list[tuple[int, int, int]]] = [
        (0, 1, 2),  # Rows
        (3, 4, 5),
        (6, 7, 8),
        (0, 3, 6),  # Columns
        (1, 4, 7),
        (2, 5, 8),
        (0, 4, 8),  # Diagonals
        (2, 4, 6),
    ]

    def __init__(self, cells: Iterable[Mark] | None = None):
        if cells is None:
            self._cells = [Mark.EMPTY] * (self.SIZE * self.SIZE)
        else:
            self._cells = [Mark(c) for c in cells]
            if len(self._cells) != self.SIZE * self.SIZE:
                raise ValueError(f"Board must have {self.SIZE * self.SIZE} cells")

    def __repr__(self) -> str:
        return f"Board({''.join(str(c) for c in self._cells)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    # Boards are mutable, so they compare by contents but are not hashable
    __hash__ = None

    @property
    def cells(self) -> tuple[Mark, ...]:
        """Read-only view of all nine cells."""
        return tuple(self._cells)

    def _index(self, col: int, row: int) -> int:
        if not 0 <= col < self.SIZE:
            raise OutOfBoundsError(f"Column out of bounds: {col}")
        if not 0 <= row < self.SIZE:
            raise OutOfBoundsError(f"Row out of bounds: {row}")
        return col + row * self.SIZE

    def get(self, col: int, row: int) -> Mark:
        """Return the mark at (col, row)."""
        return self._cells[self._index(col, row)]

    def set(self, col: int, row: int, mark: Mark) -> bool:
        """
        Place a mark on an empty cell.

        Returns:
            True if the mark was placed, False if the cell was already taken.
        """
        index = self._index(col, row)
        if self._cells[index] != Mark.EMPTY:
            return False
        self._cells[index] = mark
        return True

    def empty_cells(self) -> list[tuple[int, int]]:
        """All (col, row) positions that are still empty."""
        return [
            (i % self.SIZE, i // self.SIZE)
            for i, mark in enumerate(self._cells)
            if mark == Mark.EMPTY
        ]

    def is_won(self) -> bool:
        """True if any row, column or diagonal holds three identical marks."""
        for a, b, c in self.WIN_LINES:
            if self._cells[a] != Mark.EMPTY and self._cells[a] == self._cells[b] == self._cells[c]:
                return True
        return False

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells
