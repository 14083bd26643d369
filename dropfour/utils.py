"""
utils.py - Constants, value types and helpers for the dropfour engine

This module provides the board defaults, the Player and move-result types,
the scan directions used by win detection and ASCII rendering of a grid.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, List, Optional, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win
EMPTY = 0
DEFAULT_COLORS = ("red", "yellow")


class InvalidDimensions(ValueError):
    """Raised when a board is requested with a non-positive height or width."""

    def __init__(self, height: Any, width: Any):
        super().__init__(f"Board dimensions must be positive, got {height}x{width}")
        self.height = height
        self.width = width


@dataclass(frozen=True)
class Player:
    """
    One of the two players.

    Only ``order`` matters to the engine: it decides who moves first and how
    the player is numbered. ``color`` is carried for whoever draws the board.
    """
    order: int
    color: Optional[str] = None

    @property
    def marker(self) -> int:
        """Value stored in a board cell occupied by this player."""
        return self.order + 1

    @property
    def label(self) -> str:
        return f"Player {self.order + 1}"

    def __str__(self):
        return "X" if self.order == 0 else "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class MoveOutcome(Enum):
    """What happened to a single drop request."""
    REJECTED = auto()
    CONTINUED = auto()
    WON = auto()
    TIED = auto()


@dataclass(frozen=True)
class MoveResult:
    """
    Report returned for every drop request.

    ``player`` is the mover (the winner for WON). ``row`` and ``column`` locate
    the cell the piece landed in. All three are None for a rejected drop.
    """
    outcome: MoveOutcome
    player: Optional[Player] = None
    row: Optional[int] = None
    column: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.outcome != MoveOutcome.REJECTED


REJECTED = MoveResult(MoveOutcome.REJECTED)


class Direction(Enum):
    """Directions a four-in-a-row run can extend from its first cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col), in the order the win scan tries them
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def run_from(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> List[Tuple[int, int]]:
    """
    Build the run of cells starting at (row, col) and extending in a direction.

    The coordinates are not bounds-checked.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(length)]


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < height and 0 <= col < width


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: 2D array of cell markers (0 empty, 1 first player, 2 second)

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    height, width = grid.shape
    symbols = {EMPTY: " ", 1: "X", 2: "O"}
    border = "|" + "-" * (width * 2 - 1) + "|"

    lines = [border]
    for row in range(height):
        lines.append("|" + " ".join(symbols.get(int(cell), "?") for cell in grid[row]) + "|")
    lines.append(border)
    # Column numbers wrap after 9 so wide boards stay aligned
    lines.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(lines)
