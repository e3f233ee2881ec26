"""
connect4.game - Core game mechanics for Connect Four

This package contains the board representation, the rules engine and its
error types, and the Gymnasium environment built on the engine.
"""

from connect4.game.board import Board
from connect4.game.errors import (Connect4Error, Connect4ErrorType, ColumnFullError,
                                  GameOverError, InvalidColumnError)
from connect4.game.rules import Connect4Game, ConnectFourEnv, GameEngine

__all__ = ['Board', 'Connect4Game', 'ConnectFourEnv', 'GameEngine',
           'Connect4Error', 'Connect4ErrorType', 'ColumnFullError',
           'GameOverError', 'InvalidColumnError']
