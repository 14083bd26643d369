"""
dropfour.interfaces - User interfaces for Connect Four

Front ends that collect moves from people and draw the board.
"""

# Don't import anything here to avoid circular imports
__all__ = []
