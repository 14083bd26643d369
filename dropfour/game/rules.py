"""
rules.py - Game state machine and Gymnasium environment for dropfour

This module provides:
1. Game, which owns a Board, the two players, the turn and the completion flag
2. Function-style wrappers over Game for UI code (new_game, drop_piece, ...)
3. ConnectFourEnv, the same engine behind the Gymnasium interface
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, REJECTED, GameStatus, MoveOutcome,
                            MoveResult, Player)


class Game:
    """
    A single two-player game.

    A game starts IN_PROGRESS and ends once, either WON or TIED. After that
    every drop is rejected. To play again, construct a new Game.
    """

    def __init__(self, height: int, width: int, players: Sequence[Player]):
        """
        Args:
            height: Number of rows
            width: Number of columns
            players: The two players; the one with order 0 moves first

        Raises:
            InvalidDimensions: If height or width is not positive
            ValueError: If players is not one player of each order 0 and 1
        """
        self.board = Board(height, width)
        self.players = _order_players(players)
        self.current_player = self.players[0]
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_line: List[Tuple[int, int]] = []
        self.last_move: Optional[Tuple[int, int]] = None
        self.moves_made = 0
        debug.info(f"New {height}x{width} game", "game")

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def is_complete(self) -> bool:
        return self.status.is_game_over()

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Out-of-range columns, full columns and moves after the game has ended
        are ignored and reported as REJECTED without touching any state.

        Returns:
            MoveResult with outcome CONTINUED, WON, TIED or REJECTED
        """
        if self.is_complete:
            debug.debug(f"Ignoring drop in column {column}: game is over ({self.status.name})", "game")
            return REJECTED

        row = self.board.find_spot_for_col(column)
        if row is None:
            debug.debug(f"Ignoring drop in column {column}: full or off the board", "game")
            return REJECTED

        mover = self.current_player
        self.board.place(row, column, mover)
        self.last_move = (row, column)
        self.moves_made += 1

        # win takes precedence over a board-filling last move
        winning_line = self.board.find_winning_run(mover)
        if winning_line:
            self.winning_line = winning_line
            self._end(GameStatus.WON, mover)
            return MoveResult(MoveOutcome.WON, mover, row, column)

        if self.board.is_full():
            self._end(GameStatus.TIED)
            return MoveResult(MoveOutcome.TIED, mover, row, column)

        self.current_player = self.players[1 - mover.order]
        debug.trace(f"{self.current_player.label} to move", "game")
        return MoveResult(MoveOutcome.CONTINUED, mover, row, column)

    def _end(self, status: GameStatus, winner: Optional[Player] = None):
        self.status = status
        self.winner = winner
        debug.info(self.end_message(), "game")

    def end_message(self) -> Optional[str]:
        """Announcement for a finished game, None while it is in progress."""
        if self.status == GameStatus.WON:
            return f"{self.winner.label} won!"
        if self.status == GameStatus.TIED:
            return "Tie!"
        return None

    def cell_at(self, row: int, col: int) -> Optional[Player]:
        """Player occupying a cell, None if empty or off the board."""
        marker = self.board.marker_at(row, col)
        if marker == 0:
            return None
        return self.players[marker - 1]

    def valid_moves(self) -> List[int]:
        if self.is_complete:
            return []
        return self.board.get_valid_moves()

    def render(self) -> str:
        return self.board.render()

    def __str__(self) -> str:
        return self.render()


def _order_players(players: Sequence[Player]) -> Tuple[Player, Player]:
    players = tuple(players)
    if len(players) != 2 or not all(isinstance(p, Player) for p in players):
        raise ValueError("A game needs exactly two players")

    for player in players:
        if not isinstance(player.order, int) or isinstance(player.order, bool):
            raise ValueError(f"Player order must be an int, got {player.order!r}")

    first, second = sorted(players, key=lambda p: p.order)
    if (first.order, second.order) != (0, 1):
        raise ValueError(f"Player orders must be 0 and 1, got {first.order} and {second.order}")
    return first, second


def new_game(height: int, width: int, players: Sequence[Player]) -> Game:
    return Game(height, width, players)


def drop_piece(game: Game, column: int) -> MoveResult:
    return game.drop_piece(column)


def current_player(game: Game) -> Player:
    return game.current_player


def is_complete(game: Game) -> bool:
    return game.is_complete


def cell_at(game: Game, row: int, col: int) -> Optional[Player]:
    return game.cell_at(row, col)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same env; rewards are from the point of view
    of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human']}

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 render_mode: Optional[str] = None):
        self.height = height
        self.width = width
        self.render_mode = render_mode
        self.players = (Player(0), Player(1))
        self.game = Game(height, width, self.players)

        self.action_space = spaces.Discrete(width)
        # 0 empty, 1 first player, 2 second player
        self.observation_space = spaces.Box(low=0, high=2, shape=(height, width), dtype=np.int8)

        self.reward_win = 1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.game = Game(self.height, self.width, self.players)

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if isinstance(action, np.integer):
            action = int(action)
        result = self.game.drop_piece(action)

        if result.outcome == MoveOutcome.REJECTED:
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        if result.outcome == MoveOutcome.WON:
            reward, terminated = self.reward_win, True
        elif result.outcome == MoveOutcome.TIED:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.game.valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.current_player.order,
            'game_result': self.game.status.name,
            'moves_made': self.game.moves_made,
            'winning_line': list(self.game.winning_line),
            'last_move': self.game.last_move,
        }
