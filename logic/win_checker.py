"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw.
"""

from typing import Optional, Tuple
from .game_state import Board, Player


# All winning lines as cell indices. The order is also the scan order
# used by the computer player's tie-break.
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_PATTERNS

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9-cell board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line in declaration order.

        Args:
            board: The 9-cell board.

        Returns:
            The winning triple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """Return the mark filling all three cells of a line, if any."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A full board with a completed line is a win, never a draw.
        """
        if self.get_winning_line(board) is not None:
            return False
        return all(cell is not None for cell in board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O = Player.X, Player.O

    # Test 1: Horizontal win
    board = [X, X, X, None, O, None, O, None, None]
    winner = checker.check_winner(board)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == X

    # Test 2: Vertical win
    board = [O, X, None, O, X, None, O, None, X]
    winner = checker.check_winner(board)
    print(f"Test 2 (vertical): winner = {winner}")
    assert winner == O

    # Test 3: Full board, no line
    board = [X, O, X, X, O, O, O, X, X]
    print(f"Test 3 (draw): is_draw = {checker.check_draw(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
