"""
Score tally for a TicTacToe session.
Counts wins and draws across games; lives as long as the session.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from .engine import Draw, MoveOutcome, Won
from .game_state import Player


@dataclass
class ScoreTally:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, outcome: MoveOutcome):
        """
        Count a finished game.

        Args:
            outcome: The terminal outcome. Continue is ignored.
        """
        if isinstance(outcome, Won):
            if outcome.player == Player.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif isinstance(outcome, Draw):
            self.draws += 1

    @property
    def games_played(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
