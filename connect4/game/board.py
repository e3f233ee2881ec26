"""
board.py - Board storage for the Connect Four engine

This module implements the Board class: the grid of cells and the per-column
next-free-row counters. A Board is owned by exactly one engine, which is the
only caller allowed to drop tokens into it. The board does not enforce game
rules such as turn order or game over; it only knows where tokens land.
"""

import numpy as np

from connect4.debug import debug
from connect4.utils import ROWS, COLS, Cell, Player, render_board_ascii


class Board:
    """
    A ROWS x COLS Connect Four grid.

    Row 0 is the top of the board and column 0 the leftmost. `next_row[c]` is
    the row the next token dropped into column c lands in; it starts at
    ROWS - 1 and goes negative once the column is full.
    """

    def __init__(self):
        """Initialize an empty board."""
        self.grid = np.full((ROWS, COLS), Cell.EMPTY, dtype=np.int8)
        self.next_row = np.full(COLS, ROWS - 1, dtype=np.int8)

    def is_column_full(self, column: int) -> bool:
        return self.next_row[column] < 0

    def is_full(self) -> bool:
        """Check whether every column is full."""
        return bool(np.all(self.next_row < 0))

    def occupied(self) -> int:
        """Count the cells holding a token."""
        return int(np.count_nonzero(self.grid))

    def valid_columns(self):
        return [int(c) for c in np.flatnonzero(self.next_row >= 0)]

    def drop(self, column: int, player: Player) -> int:
        """
        Place a player's token at the lowest free row of a column.

        The caller must have checked that the column is not full.

        Args:
            column: The column to drop into (0-indexed)
            player: The player whose token is placed

        Returns:
            The row index the token landed in
        """
        row = int(self.next_row[column])
        self.grid[row, column] = Cell.of(player)
        self.next_row[column] -= 1
        debug.trace(f"Placed {player.symbol} at ({row}, {column})", "board")
        return row

    def copy_grid(self) -> np.ndarray:
        return self.grid.copy()

    # Line extraction for win detection. Each returns the cells of one axis
    # through (row, column), limited to the span a run of four could cover.

    def row_window(self, row: int, column: int) -> np.ndarray:
        start = max(0, column - 3)
        end = min(COLS, column + 4)
        return self.grid[row, start:end]

    def column_window(self, row: int, column: int) -> np.ndarray:
        start = max(0, row - 3)
        end = min(ROWS, row + 4)
        return self.grid[start:end, column]

    def descending_diagonal(self, row: int, column: int) -> np.ndarray:
        """Cells on the top-left to bottom-right diagonal through (row, column)."""
        distance = min(column, row, 3)
        r, c = row - distance, column - distance
        cells = []
        while r < ROWS and c < COLS:
            cells.append(self.grid[r, c])
            r += 1
            c += 1
        return np.array(cells, dtype=np.int8)

    def ascending_diagonal(self, row: int, column: int) -> np.ndarray:
        """Cells on the bottom-left to top-right diagonal through (row, column)."""
        distance = min(column, ROWS - 1 - row, 3)
        r, c = row + distance, column - distance
        cells = []
        while r >= 0 and c < COLS:
            cells.append(self.grid[r, c])
            r -= 1
            c += 1
        return np.array(cells, dtype=np.int8)

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
