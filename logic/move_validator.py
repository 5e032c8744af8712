"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

import operator
from typing import Optional, List
from dataclasses import dataclass
from .game_state import BOARD_CELLS, GameState, Player


class InvalidMoveError(ValueError):
    """
    Raised when a move is refused.

    Callers treat it as a no-op signal: the game state is left untouched.
    """


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def raise_if_invalid(self):
        if not self.is_valid:
            raise InvalidMoveError(self.error_message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells
    4. Only the current player may move
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).
            player: Who is moving. None means "whoever's turn it is".

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Accepts numpy integers; bool is an int subclass, reject it explicitly
        try:
            if isinstance(index, bool):
                raise TypeError
            index = operator.index(index)
        except TypeError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer 0-8."
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.value}'s turn!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Empty cell indices, or [] once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
