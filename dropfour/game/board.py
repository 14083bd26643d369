"""
board.py - Board representation for the dropfour engine

This module implements the Board class: a height x width grid of cell markers
with gravity placement, occupancy queries, four-in-a-row detection and the
full-board check.
"""

from typing import List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, DIRECTION_VECTORS, EMPTY,
                            InvalidDimensions, Player, is_valid_position,
                            render_board_ascii, run_from)


class Board:
    """
    A Connect Four grid.

    Rows are indexed from the top (0) to the bottom (height - 1). Each cell
    holds EMPTY or the marker of the player occupying it. The board does not
    know whose turn it is; that belongs to the Game.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Create an empty board.

        Raises:
            InvalidDimensions: If height or width is not a positive integer
        """
        if not _is_positive_int(height) or not _is_positive_int(width):
            raise InvalidDimensions(height, width)

        self.height = int(height)
        self.width = int(width)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
        debug.debug(f"Created {self.height}x{self.width} board", "board")

    def in_bounds(self, row: int, col: int) -> bool:
        return is_valid_position(row, col, self.height, self.width)

    def is_valid_column(self, column) -> bool:
        """True if column is an integer index inside the board."""
        return _is_int(column) and 0 <= column < self.width

    def find_spot_for_col(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would land in.

        Returns:
            The lowest empty row, or None if the column is full or out of range
        """
        if not self.is_valid_column(column):
            return None

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, row: int, column: int, player: Player):
        """Mark an empty cell as occupied by player."""
        if self.grid[row, column] != EMPTY:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")

        debug.trace(f"Placing {player.label} at ({row}, {column})", "board")
        self.grid[row, column] = player.marker

    def marker_at(self, row: int, col: int) -> int:
        """Raw cell value, EMPTY for out-of-range coordinates."""
        if not self.in_bounds(row, col):
            return EMPTY
        return int(self.grid[row, col])

    def get_valid_moves(self) -> List[int]:
        """Columns whose top cell is still empty."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    def is_full(self) -> bool:
        return bool(np.all(self.grid != EMPTY))

    def _is_win(self, cells: List[Tuple[int, int]], marker: int) -> bool:
        # every coordinate must be on the board and hold the player's marker
        return all(self.in_bounds(y, x) and self.grid[y, x] == marker for y, x in cells)

    def find_winning_run(self, player: Player) -> List[Tuple[int, int]]:
        """
        Scan the whole board for a four-in-a-row of player's pieces.

        Every cell is tried as the start of a run going right, down, down-right
        and down-left, in row-major order. This rescans the full grid on each
        call; check_win_at is the equivalent check restricted to one cell.

        Returns:
            The first winning run found as (row, col) pairs, or an empty list
        """
        debug.start_timer("win_check")
        run = self._scan_for_run(player.marker)
        debug.end_timer("win_check", "board")
        return run

    def _scan_for_run(self, marker: int) -> List[Tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                for direction in DIRECTION_VECTORS:
                    cells = run_from(y, x, direction)
                    if self._is_win(cells, marker):
                        return cells
        return []

    def check_for_win(self, player: Player) -> bool:
        return bool(self.find_winning_run(player))

    def check_win_at(self, row: int, col: int) -> bool:
        """
        Check whether the piece at (row, col) is part of a four-in-a-row.

        Any new four-in-a-row must pass through the newest piece, so calling
        this for the last placed cell gives the same answer as a full scan.
        """
        marker = self.marker_at(row, col)
        if marker == EMPTY:
            return False

        for dr, dc in DIRECTION_VECTORS.values():
            count = 1
            for sign in (1, -1):
                r, c = row + sign * dr, col + sign * dc
                while self.in_bounds(r, c) and self.grid[r, c] == marker:
                    count += 1
                    r += sign * dr
                    c += sign * dc
            if count >= CONNECT_N:
                return True

        return False

    def get_state(self) -> np.ndarray:
        """Copy of the grid, safe for callers to modify."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_positive_int(value) -> bool:
    return _is_int(value) and value > 0
