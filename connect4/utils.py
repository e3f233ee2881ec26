"""
utils.py - Constants, enumerations and helpers shared across Connect Four

This module provides the board dimensions, the player/cell/status enumerations,
the immutable game state snapshot, the run-length scan used by win detection,
and ASCII rendering of a board grid.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(IntEnum):
    """Enumeration of the two players."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def symbol(self) -> str:
        return "X" if self is Player.ONE else "O"

    def __str__(self):
        return self.symbol


class Cell(IntEnum):
    """
    Enumeration of cell contents.

    Occupied cells share their integer value with the owning Player, which
    lets the grid live in a numpy int array.
    """
    EMPTY = 0
    ONE = 1
    TWO = 2

    @classmethod
    def of(cls, player: Player) -> 'Cell':
        """Get the cell occupied by the given player."""
        return cls(int(player))

    @property
    def player(self) -> Optional[Player]:
        if self is Cell.EMPTY:
            return None
        return Player(int(self))

    def __str__(self):
        return " " if self is Cell.EMPTY else self.player.symbol


class GameStatus(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = "inProgress"
    WIN = "win"
    DRAW = "draw"

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    """Snapshot of whose turn it is, the game status and the winner (if any)."""
    player_turn: Player
    game_status: GameStatus
    winner: Optional[Player] = None


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def streak(cells: Iterable[int], player: Player) -> int:
    """
    Find the longest run of consecutive cells held by a player.

    Args:
        cells: A line of cell values, scanned left to right
        player: The player whose tokens are counted

    Returns:
        The maximum number of consecutive cells equal to the player's token
    """
    target = int(Cell.of(player))
    max_streak = 0
    current = 0
    for cell in cells:
        if cell == target:
            current += 1
            max_streak = max(max_streak, current)
        else:
            current = 0
    return max_streak


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid, row 0 on top

    Returns:
        ASCII representation of the board
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    result = [border]

    for row in range(ROWS):
        result.append("|" + " ".join(str(Cell(int(v))) for v in board[row]) + "|")

    result.append(border)
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
