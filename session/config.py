"""
Session configuration for TicTacToe.
Turn pacing, who plays which mark, and debug output.
"""

from logic.game_state import GameMode, Player


class SessionConfig:
    """
    Configuration class for session settings.
    Command line flags in main.py override these per run.
    """

    # ==================== PLAYERS ====================
    # X always moves first
    HUMAN_PLAYER = Player.X
    COMPUTER_PLAYER = Player.O

    DEFAULT_MODE = GameMode.TWO_PLAYER

    # ==================== COMPUTER OPPONENT ====================
    # Pause before the computer answers so the human move is visible
    COMPUTER_DELAY_MS = 500

    # Seed for the computer's random fallback move (None = unseeded)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
    SNAPSHOT_DIR = "snapshots"
