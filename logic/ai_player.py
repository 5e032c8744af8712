"""
Computer player for TicTacToe.
Uses a fixed-priority heuristic: win now, else block, else random.
"""

from typing import Optional

import numpy as np

from .game_state import Board, Player, empty_cells
from .win_checker import WIN_PATTERNS


class ComputerPlayer:
    """
    A deliberately beatable opponent.

    Priorities, first match wins:
    1. Complete one of its own lines
    2. Block the opponent's line
    3. Pick a random empty cell

    Lines are scanned in WIN_PATTERNS order (rows, columns, diagonals),
    so with several candidates the first line in that order decides.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize the computer player.

        Args:
            rng: Random source for the fallback move. Pass a seeded
                generator for reproducible games.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def select_move(self, board: Board, me: Player, opponent: Player) -> Optional[int]:
        """
        Choose a cell for `me`.

        Args:
            board: The 9-cell board. Not modified.
            me: The computer's mark.
            opponent: The other mark.

        Returns:
            Cell index 0-8, or None if the board is full.
        """
        move = self.find_completing_move(board, me)
        if move is not None:
            return move

        move = self.find_completing_move(board, opponent)
        if move is not None:
            return move

        return self.random_move(board)

    @staticmethod
    def find_completing_move(board: Board, player: Player) -> Optional[int]:
        """
        Find the empty cell of the first line holding two of player's marks.

        Returns:
            The empty index, or None if no line is one move from complete.
        """
        for line in WIN_PATTERNS:
            owned = 0
            empty_index = None
            for i in line:
                if board[i] == player:
                    owned += 1
                elif board[i] is None:
                    empty_index = i
            if owned == 2 and empty_index is not None:
                return empty_index
        return None

    def random_move(self, board: Board) -> Optional[int]:
        """Uniformly random empty cell, or None if there is none."""
        candidates = empty_cells(board)
        if not candidates:
            return None
        return int(self.rng.choice(candidates))


# Quick test
if __name__ == "__main__":
    print("Testing ComputerPlayer...")

    ai = ComputerPlayer(np.random.default_rng(0))
    X, O = Player.X, Player.O

    # Test 1: X should complete the top row at 2
    board = [X, X, None, O, O, None, None, None, None]
    move = ai.select_move(board, me=X, opponent=O)
    print(f"X to move, can win at 2: {move}")
    assert move == 2

    # Test 2: O has no line, must block X
    board = [X, X, None, O, None, None, None, None, None]
    move = ai.select_move(board, me=O, opponent=X)
    print(f"O to move, blocks at 2: {move}")
    assert move == 2

    print("\nComputerPlayer test done!")
