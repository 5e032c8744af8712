"""
Session controller for TicTacToe.

Owns the engine, the computer player and the score tally for the lifetime
of a session, and is the single place front ends send commands to.

Flow in vs-computer mode:
1. Human selects a cell -> engine applies the move
2. If the game goes on and it's the computer's turn, a computer move is
   scheduled after SessionConfig.COMPUTER_DELAY_MS
3. Restart or a mode switch cancels a pending computer move
4. When the scheduled move fires it re-checks the game and does nothing
   if the game it was scheduled for is gone
"""

from typing import Callable, Optional

import numpy as np

from logic.ai_player import ComputerPlayer
from logic.engine import Continue, Draw, GameEngine, MoveOutcome, Won
from logic.game_state import GameMode, GameState, GameStatus
from logic.move_validator import InvalidMoveError
from logic.scoreboard import ScoreTally

from .commands import CellSelected, Command, Restart, SwitchMode
from .config import SessionConfig
from .scheduler import CancellationToken, QueueScheduler, Scheduler


class SessionController:
    """
    Session-scoped owner of game lifecycle and scores.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[np.random.Generator] = None,
        on_change: Optional[Callable[["SessionController"], None]] = None
    ):
        """
        Initialize the session.

        Args:
            config: Session settings (defaults to SessionConfig()).
            scheduler: Where deferred computer moves are queued.
            rng: Random source for the computer player. Built from
                config.RANDOM_SEED if not given.
            on_change: Called after every state change (for redraws).
        """
        self.config = config if config is not None else SessionConfig()
        self.scheduler = scheduler if scheduler is not None else QueueScheduler()
        self.on_change = on_change

        if rng is None:
            rng = np.random.default_rng(self.config.RANDOM_SEED)

        self.tally = ScoreTally()
        self.engine = GameEngine(mode=self.config.DEFAULT_MODE, on_result=self.tally.record)
        self.computer = ComputerPlayer(rng)

        self.last_outcome: Optional[MoveOutcome] = None
        self._pending_token: Optional[CancellationToken] = None

        self._debug(f"Session started in {self.mode.name} mode")
        if self.is_computer_turn():
            self._schedule_computer_move()

    # ==================== QUERIES ====================

    @property
    def mode(self) -> GameMode:
        return self.engine.mode

    @property
    def state(self) -> GameState:
        return self.engine.current_state()

    @property
    def computer_pending(self) -> bool:
        """True while a scheduled computer move has not fired yet."""
        return self._pending_token is not None and not self._pending_token.cancelled

    def is_computer_turn(self, state: Optional[GameState] = None) -> bool:
        if state is None:
            state = self.state
        return (
            state.mode == GameMode.VS_COMPUTER
            and not state.is_game_over
            and state.current_player == self.config.COMPUTER_PLAYER
        )

    def status_text(self) -> str:
        """Human-readable status line for the current game."""
        state = self.state
        vs_computer = state.mode == GameMode.VS_COMPUTER

        if state.status == GameStatus.WON:
            if vs_computer and state.winner == self.config.COMPUTER_PLAYER:
                return "Computer wins!"
            return f"Player {state.winner.value} wins!"

        if state.status == GameStatus.DRAW:
            return "It's a draw!"

        if vs_computer:
            if state.current_player == self.config.COMPUTER_PLAYER:
                return "Computer thinking..."
            return f"Your turn ({state.current_player.value})"

        return f"Player {state.current_player.value}'s turn"

    # ==================== COMMANDS ====================

    def dispatch(self, command: Command) -> Optional[MoveOutcome]:
        """
        Handle one command from a front end.

        Returns:
            The outcome of the human move for CellSelected, else None.
        """
        if isinstance(command, CellSelected):
            return self.select_cell(command.index)
        if isinstance(command, Restart):
            self.restart()
            return None
        if isinstance(command, SwitchMode):
            self.switch_mode(command.mode)
            return None
        raise TypeError(f"Unknown command: {command!r}")

    def select_cell(self, index: int) -> Optional[MoveOutcome]:
        """
        Apply a human move.

        Refused moves (occupied cell, finished game, computer's turn) are
        no-ops and return None.
        """
        if self.is_computer_turn() or self.computer_pending:
            self._debug(f"Ignored cell {index}: waiting for the computer")
            return None

        mover = self.config.HUMAN_PLAYER if self.mode == GameMode.VS_COMPUTER else None
        try:
            outcome = self.engine.apply_move(index, mover)
        except InvalidMoveError as e:
            self._debug(f"Ignored cell {index}: {e}")
            return None

        self._debug(f"Cell {index} -> {self._describe(outcome)}")
        self._after_move(outcome)
        return outcome

    def restart(self):
        """New game in the current mode. Scores are kept."""
        self._start_game(self.mode)

    def switch_mode(self, mode: GameMode):
        """New game in another mode. Scores are kept."""
        self._start_game(mode)

    # ==================== INTERNALS ====================

    def _start_game(self, mode: GameMode):
        self._cancel_pending()
        self.engine.reset(mode)
        self.last_outcome = None
        self._debug(f"New game ({mode.name})")

        # Computer opens when configured to play X
        if self.is_computer_turn():
            self._schedule_computer_move()
        self._notify()

    def _after_move(self, outcome: MoveOutcome):
        self.last_outcome = outcome
        if isinstance(outcome, Continue) and self.is_computer_turn():
            self._schedule_computer_move()
        self._notify()

    def _schedule_computer_move(self):
        token = CancellationToken()
        generation = self.engine.generation
        self._pending_token = token
        self.scheduler.schedule(
            self.config.COMPUTER_DELAY_MS,
            lambda: self._computer_move(token, generation),
            token
        )

    def _computer_move(self, token: CancellationToken, generation: int) -> Optional[MoveOutcome]:
        """Deferred computer reply. No-op if the game it belongs to is gone."""
        if self._pending_token is token:
            self._pending_token = None

        if token.cancelled or generation != self.engine.generation:
            self._debug("Dropped stale computer move")
            return None

        state = self.state
        if not self.is_computer_turn(state):
            self._debug("Dropped computer move: not the computer's turn")
            return None

        me = self.config.COMPUTER_PLAYER
        index = self.computer.select_move(state.board, me, me.opposite())
        if index is None:
            return None

        outcome = self.engine.apply_move(index, me)
        self._debug(f"Computer plays {index} -> {self._describe(outcome)}")
        self._after_move(outcome)
        return outcome

    def _cancel_pending(self):
        if self._pending_token is not None:
            self._pending_token.cancel()
            self._pending_token = None

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self)

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[session] {message}")

    @staticmethod
    def _describe(outcome: MoveOutcome) -> str:
        if isinstance(outcome, Won):
            return f"{outcome.player.value} wins on {list(outcome.winning_line)}"
        if isinstance(outcome, Draw):
            return "draw"
        return f"{outcome.next_player.value} to move"
