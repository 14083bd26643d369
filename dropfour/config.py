"""
config.py - Settings for starting a game

GameConfig gathers what the original start page collected (board size and the
two player colors) together with the logging level.
"""

import argparse
from dataclasses import dataclass

from dropfour.debug import DebugLevel, debug
from dropfour.game.rules import Game
from dropfour.utils import DEFAULT_COLORS, DEFAULT_HEIGHT, DEFAULT_WIDTH, Player


@dataclass
class GameConfig:
    """Configuration for a new game."""

    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    p1_color: str = DEFAULT_COLORS[0]
    p2_color: str = DEFAULT_COLORS[1]
    log_level: str = "warning"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        """Build from parsed CLI arguments; missing attributes keep defaults."""
        config = cls()
        for name in ("height", "width", "p1_color", "p2_color", "log_level"):
            value = getattr(args, name, None)
            if value is not None:
                setattr(config, name, value)
        if getattr(args, "debug", False):
            config.log_level = "debug"
        return config

    def apply_logging(self):
        """Push the log level into the shared debug manager."""
        if not debug.set_from_string(self.log_level):
            debug.configure(level=DebugLevel.WARNING)

    def players(self):
        return Player(0, self.p1_color), Player(1, self.p2_color)

    def new_game(self) -> Game:
        return Game(self.height, self.width, self.players())
