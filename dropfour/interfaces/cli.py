"""
cli.py - Command-line interface for playing dropfour

Two people share the terminal: each turn the current player types a column,
the board is redrawn, and the result is announced when the game ends.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from dropfour.config import GameConfig
from dropfour.debug import debug
from dropfour.game.rules import Game
from dropfour.utils import DEFAULT_COLORS, DEFAULT_HEIGHT, DEFAULT_WIDTH, InvalidDimensions, MoveOutcome

QUIT = -1
RESTART = -2


class SimpleCLI:
    """Hot-seat Connect Four in the terminal."""

    def __init__(self, stdin: TextIO = None, stdout: TextIO = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.args = None
        self.config = GameConfig()
        self.game: Optional[Game] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Two-player Connect Four')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game in the terminal')
        play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
        play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
        play_parser.add_argument('--p1-color', default=DEFAULT_COLORS[0], help='Color for player 1')
        play_parser.add_argument('--p2-color', default=DEFAULT_COLORS[1], help='Color for player 2')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        play_parser.add_argument('--log-level', default='warning',
                                 choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                                 help='Logging verbosity')
        return parser

    def parse_args(self, argv: List[str] = None) -> None:
        self.args = self.build_parser().parse_args(argv)
        self.config = GameConfig.from_args(self.args)
        self.config.apply_logging()

    def run(self, argv: List[str] = None) -> int:
        """Run the command selected on the command line; returns an exit code."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()

        self.write("Please specify a command. Use --help for options.")
        return 1

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def start_game(self) -> bool:
        try:
            self.game = self.config.new_game()
        except InvalidDimensions as e:
            debug.error(str(e), "cli")
            self.write(f"Cannot start game: {e}")
            return False
        return True

    def play_game(self) -> int:
        """Play until someone wins, the board fills up or a player quits."""
        if not self.start_game():
            return 1

        self.write("Starting a new Connect Four game!")
        self.write(f"Enter a column (0-{self.game.width - 1}) to drop a piece, 'r' to restart, 'q' to quit.")
        self.write(self.game.render())

        while not self.game.is_complete:
            move = self.get_move()
            if move is None:
                continue
            if move == QUIT:
                self.write("Quitting game.")
                return 0
            if move == RESTART:
                self.start_game()
                self.write("Game restarted.")
                self.write(self.game.render())
                continue

            result = self.game.drop_piece(move)
            if result.outcome == MoveOutcome.REJECTED:
                self.write(f"Column {move} is full, pick another one.")
                continue
            self.write(self.game.render())

        self.write(self.game.end_message())
        return 0

    def get_move(self) -> Optional[int]:
        """
        Read one move for the current player.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not usable
        """
        player = self.game.current_player
        self.stdout.write(f"{player.label} ({player.color}, {player}) move: ")
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            return QUIT
        user_input = line.strip().lower()

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            self.write("Invalid input. Please enter a column number, 'r' or 'q'.")
            return None

        if not 0 <= move < self.game.width:
            self.write(f"Column must be between 0 and {self.game.width - 1}.")
            return None
        return move


def main(argv: List[str] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
