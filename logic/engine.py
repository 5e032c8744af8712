"""
Game engine for TicTacToe.

Owns the GameState and is the only place it is mutated. Every accepted
move returns one of three outcomes:

- Continue(next_player): the game goes on
- Won(player, winning_line): a line was completed
- Draw(): the board filled up with no line
"""

import operator
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .game_state import GameMode, GameState, GameStatus, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


@dataclass(frozen=True)
class Continue:
    next_player: Player


@dataclass(frozen=True)
class Won:
    player: Player
    winning_line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    pass


MoveOutcome = Union[Continue, Won, Draw]

# Called once per terminal transition (Won or Draw)
ResultCallback = Callable[[MoveOutcome], None]


class GameEngine:
    """
    Applies moves to a single game and detects wins and draws.

    The state is exposed only as snapshots through current_state().
    """

    def __init__(
        self,
        mode: GameMode = GameMode.TWO_PLAYER,
        on_result: Optional[ResultCallback] = None
    ):
        """
        Initialize the engine.

        Args:
            mode: Initial game mode.
            on_result: Called with the outcome whenever a game ends,
                so the session can update its score tally.
        """
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.on_result = on_result

        # Bumped on every reset so deferred callbacks can spot a new game
        self._generation = 0
        self._state = GameState(mode=mode)

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self, mode: Optional[GameMode] = None) -> GameState:
        """
        Start a fresh game.

        Args:
            mode: Mode for the new game. Keeps the current mode if None.

        Returns:
            Snapshot of the new state.
        """
        if mode is None:
            mode = self._state.mode
        self._state = GameState(mode=mode)
        self._generation += 1
        return self.current_state()

    def current_state(self) -> GameState:
        """Read-only snapshot of the current state."""
        return self._state.copy()

    def apply_move(self, index: int, player: Optional[Player] = None) -> MoveOutcome:
        """
        Mark a cell for the current player.

        Args:
            index: Cell to mark (0-8).
            player: Expected mover. If given and it is not this player's
                turn the move is refused.

        Returns:
            The MoveOutcome of this move.

        Raises:
            InvalidMoveError: If the game is over, the index is out of
                range, the cell is taken or it is not player's turn.
                The state is unchanged.
        """
        state = self._state
        self.validator.validate_move(state, index, player).raise_if_invalid()
        index = operator.index(index)

        mover = state.current_player
        state.board[index] = mover
        state.move_count += 1

        # Win is checked before draw: a full board with a line is a win
        line = self.win_checker.get_winning_line(state.board)
        if line is not None:
            state.status = GameStatus.WON
            state.winner = mover
            state.winning_line = line
            outcome = Won(player=mover, winning_line=line)
        elif not state.get_empty_cells():
            state.status = GameStatus.DRAW
            outcome = Draw()
        else:
            state.current_player = mover.opposite()
            return Continue(next_player=state.current_player)

        if self.on_result is not None:
            self.on_result(outcome)
        return outcome
