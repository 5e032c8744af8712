"""
TicTacToe
=========
Two-player tic-tac-toe with an optional heuristic computer opponent.
Tracks board state, turn order, win/draw detection and session scores.

Computer priority: win now -> block -> random empty cell
"""

__version__ = "1.0.0"
