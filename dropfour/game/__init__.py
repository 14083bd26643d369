"""
dropfour.game - Core game mechanics for Connect Four

This package contains the board representation and the game state machine.
"""

from dropfour.game.board import Board
from dropfour.game.rules import (ConnectFourEnv, Game, cell_at, current_player, drop_piece,
                                 is_complete, new_game)

__all__ = ['Board', 'Game', 'ConnectFourEnv', 'new_game', 'drop_piece', 'current_player',
           'is_complete', 'cell_at']
