"""
dropfour - Two-player Connect Four game engine

This package provides the board model, move handling, win detection and
turn/end-of-game state for Connect Four, plus a terminal front end and a
Gymnasium environment built on the same engine.
"""

# Version number
__version__ = '0.1.0'
