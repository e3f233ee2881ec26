"""
rules.py - Game state machine and Gymnasium environment for Connect Four

This module provides:
1. Connect4Game, the command/query contract presentation layers depend on
2. GameEngine, the rules engine: move validation, turn order, win/draw detection
3. ConnectFourEnv, a Gymnasium-compatible environment driving a GameEngine
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4.debug import debug
from connect4.game.board import Board
from connect4.game.errors import (Connect4Error, ColumnFullError, GameOverError,
                                  InvalidColumnError)
from connect4.utils import (ROWS, COLS, CONNECT_N, GameState, GameStatus, Player,
                            render_board_ascii, streak)


class Connect4Game(ABC):
    """Contract between a Connect Four engine and whatever presents it."""

    @abstractmethod
    def play_column(self, column: int, player: Optional[Player] = None) -> int:
        """
        Drop a token into the lowest free row of a column.

        The engine tracks whose turn it is; `player` overrides that for a
        single move. On error the game state is left unchanged.

        Raises:
            GameOverError: The game has already ended
            InvalidColumnError: The column is outside the board
            ColumnFullError: The column has no free row
        """

    @abstractmethod
    def grid(self) -> np.ndarray:
        """Return a copy of the board; grid[0][0] is the top-left cell."""

    @abstractmethod
    def game_state(self) -> GameState:
        """Return whose turn it is, the game status and the winner (if any)."""

    @abstractmethod
    def reset(self) -> None:
        """Clear the board and start a new game with Player ONE to move."""


class GameEngine(Connect4Game):
    """
    Connect Four rules engine.

    Owns the board, the current turn, the game status and the winner. The
    board is only mutated by play_column and replaced by reset; queries hand
    out copies.
    """

    def __init__(self):
        debug.debug("Initializing GameEngine", "engine")
        self.reset()

    def reset(self) -> None:
        debug.debug("Resetting game", "engine")
        self._board = Board()
        self._player_turn = Player.ONE
        self._game_status = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None

    def play_column(self, column: int, player: Optional[Player] = None) -> int:
        self._validate_play(column)
        playing = self._player_turn if player is None else Player(player)

        debug.debug(f"Player {playing.symbol} plays column {column}", "engine")
        row = self._board.drop(column, playing)
        self._player_turn = playing.other()

        debug.start_timer("win_check")
        won = self._check_win(row, column, playing)
        debug.end_timer("win_check", "engine")

        if won:
            self._winner = playing
            self._game_status = GameStatus.WIN
            debug.info(f"Player {playing.symbol} wins with a move at ({row}, {column})", "engine")
        elif self._board.is_full():
            self._game_status = GameStatus.DRAW
            debug.info("Game ends in a draw", "engine")

        return row

    def grid(self) -> np.ndarray:
        return self._board.copy_grid()

    def game_state(self) -> GameState:
        return GameState(
            player_turn=self._player_turn,
            game_status=self._game_status,
            winner=self._winner,
        )

    def is_game_over(self) -> bool:
        return self._game_status.is_game_over()

    def valid_moves(self) -> List[int]:
        """Columns that would accept a token now; empty once the game is over."""
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def moves_made(self) -> int:
        return self._board.occupied()

    def render(self) -> str:
        return self._board.render()

    def __str__(self) -> str:
        return self.render()

    def _validate_play(self, column) -> None:
        if self._game_status.is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over", "engine")
            raise GameOverError()

        if isinstance(column, bool) or not isinstance(column, (int, np.integer)) \
                or not 0 <= column < COLS:
            debug.debug(f"Rejected move: column {column!r} out of bounds", "engine")
            raise InvalidColumnError(column, COLS)

        if self._board.is_column_full(column):
            debug.debug(f"Rejected move: column {column} is full", "engine")
            raise ColumnFullError(int(column))

    def _check_win(self, row: int, column: int, player: Player) -> bool:
        """Check the four lines through the last placed token for a run of CONNECT_N."""
        lines = (
            self._board.row_window(row, column),
            self._board.column_window(row, column),
            self._board.descending_diagonal(row, column),
            self._board.ascending_diagonal(row, column),
        )
        return any(streak(line, player) >= CONNECT_N for line in lines)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step plays one column for whichever player's turn it is. Rewards are
    from Player ONE's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)

        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.engine = GameEngine()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage faster solutions

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by playing a column.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        try:
            self.engine.play_column(action)
        except Connect4Error as error:
            debug.warning(f"Invalid action {action}: {error.message}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = error.type.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        state = self.engine.game_state()
        reward = self.reward_step
        terminated = state.game_status.is_game_over()

        if state.game_status is GameStatus.WIN:
            reward = self.reward_win if state.winner is Player.ONE else self.reward_lose
        elif state.game_status is GameStatus.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {state.game_status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return render_board_ascii(self.engine.grid())
        if self.render_mode == "human":
            print(render_board_ascii(self.engine.grid()))
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.grid()

    def _get_info(self) -> Dict[str, Any]:
        state = self.engine.game_state()
        valid_moves = self.engine.valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': int(state.player_turn),
            'game_status': state.game_status.name,
            'winner': int(state.winner) if state.winner is not None else None,
            'moves_made': self.engine.moves_made(),
        }
