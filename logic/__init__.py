"""
Logic module for TicTacToe.
Handles game state, rules, scoring and the computer opponent.
"""

from .game_state import GameState, GameMode, GameStatus, Player
from .move_validator import MoveValidator, InvalidMoveError
from .win_checker import WinChecker, WIN_PATTERNS
from .engine import GameEngine, MoveOutcome, Continue, Won, Draw
from .scoreboard import ScoreTally
from .ai_player import ComputerPlayer
