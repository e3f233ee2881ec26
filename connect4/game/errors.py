"""
errors.py - Errors raised by the Connect Four engine

Every rejected move raises a Connect4Error whose `type` tells the caller which
rule was broken. The engine raises before touching any state, so catching one
of these never leaves a half-applied move behind.
"""

from enum import Enum, auto


class Connect4ErrorType(Enum):
    """Kinds of rejected moves."""
    GAME_OVER = auto()       # The game already ended in a win or draw
    COLUMN_FULL = auto()     # The column holds ROWS tokens
    INVALID_COLUMN = auto()  # The column index is outside the board


class Connect4Error(Exception):
    """
    Base class for Connect Four rule violations.

    Attributes:
        type: The kind of error, for branching without matching messages
        message: Human-readable description
    """

    default_type: Connect4ErrorType = None

    def __init__(self, type: Connect4ErrorType = None, message: str = ""):
        self.type = type or self.default_type
        self.message = message or self.type.name.replace("_", " ").capitalize()
        super().__init__(self.message)

    def __repr__(self):
        return f"{self.__class__.__name__}(type={self.type.name}, message={self.message!r})"


class GameOverError(Connect4Error):
    default_type = Connect4ErrorType.GAME_OVER

    def __init__(self, message: str = "Game over"):
        super().__init__(message=message)


class ColumnFullError(Connect4Error):
    default_type = Connect4ErrorType.COLUMN_FULL

    def __init__(self, column: int):
        self.column = column
        super().__init__(message=f"Column {column} is full")


class InvalidColumnError(Connect4Error):
    default_type = Connect4ErrorType.INVALID_COLUMN

    def __init__(self, column, num_columns: int):
        self.column = column
        super().__init__(message=f"Column must be an integer between 0 and {num_columns - 1}, got {column!r}")
