"""
cli.py - Command-line interface for Connect Four

This module provides a terminal front end for the rules engine: hot-seat play
for two people, replay of a scripted move sequence, and a small benchmark.
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4.debug import debug, DebugLevel
from connect4.game.errors import Connect4Error
from connect4.game.rules import Connect4Game, GameEngine
from connect4.utils import COLS, GameState, GameStatus, Player, render_board_ascii

# Special command codes returned by get_human_move
QUIT = -1
RESTART = -2


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, game: Optional[Connect4Game] = None):
        """Initialize the CLI."""
        self.game = game or GameEngine()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game in this terminal')

        replay_parser = subparsers.add_parser('replay', help='Play a scripted sequence of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated column indices, e.g. 3,3,4,4')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark engine performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments and return an exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
            return 0
        if self.args.command == 'replay':
            return self.replay(self.args.moves)
        if self.args.command == 'benchmark':
            self.benchmark(self.args.iterations)
            return 0

        print("Please specify a command. Use --help for options.")
        return 1

    def print_board(self) -> None:
        print()
        print(render_board_ascii(self.game.grid()))
        print()

    def play_game(self) -> None:
        """Play Connect Four interactively until the players stop."""
        print("Welcome to Connect 4!")
        print(f"Enter a column number (0-{COLS - 1}) to play. 'q' quits, 'r' restarts.")
        self.print_board()

        while True:
            state = self.game.game_state()

            if state.game_status.is_game_over():
                self.announce_result(state)
                if not self.ask_play_again():
                    print("Thanks for playing!")
                    return
                self.game.reset()
                self.print_board()
                continue

            move = self.get_human_move(state.player_turn)
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                self.game.reset()
                print("Game restarted.")
                self.print_board()
                continue

            try:
                self.game.play_column(move)
            except Connect4Error as error:
                debug.debug(f"Move rejected: {error.type.name}", "cli")
                print(error.message)
                continue

            self.print_board()

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Get a move from the player whose turn it is.

        Returns:
            Column index, a special command code, or None if the input was invalid
        """
        try:
            user_input = input(f"Player {player.symbol} - choose a column (0-{COLS - 1}): ")
        except EOFError:
            return QUIT

        user_input = user_input.strip().lower()
        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            print(f"Invalid input. Please enter a number between 0 and {COLS - 1}.")
            return None

        if not 0 <= move < COLS:
            print(f"Column must be between 0 and {COLS - 1}.")
            return None
        return move

    def announce_result(self, state: GameState) -> None:
        if state.game_status is GameStatus.WIN:
            print(f"Player {state.winner.symbol} wins!")
        else:
            print("It's a draw!")

    def ask_play_again(self) -> bool:
        try:
            answer = input("Play again? (y/n): ")
        except EOFError:
            return False
        return answer.strip().lower() == 'y'

    def replay(self, moves: str) -> int:
        """
        Play a comma-separated sequence of columns and show the result.

        Stops at the first rejected move. Returns 0 if every move was played,
        1 otherwise.
        """
        try:
            columns = [int(c) for c in moves.split(',') if c.strip()]
        except ValueError:
            print(f"Error parsing moves: {moves!r}")
            return 1

        exit_code = 0
        for number, column in enumerate(columns, start=1):
            try:
                self.game.play_column(column)
            except Connect4Error as error:
                print(f"Move {number} (column {column}) rejected: {error.message}")
                exit_code = 1
                break

        self.print_board()
        state = self.game.game_state()
        if state.game_status.is_game_over():
            self.announce_result(state)
        else:
            print(f"Player {state.player_turn.symbol} to move.")
        return exit_code

    def benchmark(self, iterations: int) -> None:
        """Time random games played through the engine."""
        print(f"Running benchmark with {iterations} games...")
        engine = GameEngine()
        total_moves = 0
        outcomes = {status: 0 for status in (GameStatus.WIN, GameStatus.DRAW)}

        debug.start_timer("game_simulation")
        for _ in range(iterations):
            engine.reset()
            while not engine.is_game_over():
                engine.play_column(random.choice(engine.valid_moves()))
                total_moves += 1
            outcomes[engine.game_state().game_status] += 1
        elapsed = debug.end_timer("game_simulation", "cli")

        print(f"Played {iterations} games with {total_moves} total moves: "
              f"{elapsed:.6f} seconds total")
        if iterations and total_moves:
            print(f"{elapsed / iterations * 1000:.6f} ms per game, "
                  f"{elapsed / total_moves * 1000:.6f} ms per move")
        print(f"Wins: {outcomes[GameStatus.WIN]}, draws: {outcomes[GameStatus.DRAW]}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
