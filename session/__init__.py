"""
Session module for TicTacToe.
Handles game lifecycle, scores, commands and the delayed computer reply.
"""

from .config import SessionConfig
from .commands import CellSelected, Restart, SwitchMode
from .scheduler import CancellationToken, QueueScheduler, TkScheduler
from .controller import SessionController
