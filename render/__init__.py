"""
Render module for TicTacToe.
Draws the board for the window and for PNG snapshots.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer
