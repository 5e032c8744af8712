"""
Test script for the TicTacToe session layer.
Covers commands, the delayed computer reply, stale-move guards and scores.

    python test_session.py
"""

import sys

import numpy as np

from logic.engine import Continue, Won
from logic.game_state import GameMode, Player, mark_counts
from main import ConsoleGame, parse_command
from session.commands import CellSelected, Restart, SwitchMode
from session.config import SessionConfig
from session.controller import SessionController
from session.scheduler import CancellationToken, QueueScheduler, TkScheduler

X, O = Player.X, Player.O


def make_session(mode=GameMode.TWO_PLAYER, seed=0, **overrides):
    config = SessionConfig()
    config.DEFAULT_MODE = mode
    config.COMPUTER_DELAY_MS = 0
    for key, value in overrides.items():
        setattr(config, key, value)
    scheduler = QueueScheduler()
    session = SessionController(config=config, scheduler=scheduler, rng=np.random.default_rng(seed))
    return session, scheduler


# ==================== SCHEDULER ====================

def test_queue_scheduler_runs_in_order():
    print("\n=== Testing Scheduler ===")
    scheduler = QueueScheduler()
    calls = []
    scheduler.schedule(100, lambda: calls.append("a"), CancellationToken())
    scheduler.schedule(500, lambda: calls.append("b"), CancellationToken())

    assert scheduler.next_delay_ms == 500
    assert scheduler.run_pending() == 2
    assert calls == ["a", "b"]
    assert scheduler.pending == []
    assert scheduler.next_delay_ms == 0


def test_cancelled_task_does_not_run():
    scheduler = QueueScheduler()
    calls = []
    token = CancellationToken()
    scheduler.schedule(0, lambda: calls.append("x"), token)
    token.cancel()

    assert scheduler.run_pending() == 0
    assert calls == []


# ==================== TWO PLAYERS ====================

def test_two_player_alternates_and_scores():
    print("\n=== Testing Two-Player Session ===")
    session, scheduler = make_session()
    assert session.status_text() == "Player X's turn"

    for index in (0, 1, 3, 4):
        assert isinstance(session.dispatch(CellSelected(index)), Continue)
    assert session.status_text() == "Player X's turn"

    outcome = session.dispatch(CellSelected(6))
    assert outcome == Won(player=X, winning_line=(0, 3, 6))
    assert session.status_text() == "Player X wins!"
    assert session.tally.x_wins == 1
    assert scheduler.pending == []


def test_o_win_text_in_two_player_mode():
    session, _ = make_session()
    for index in (0, 3, 1, 4, 8, 5):
        session.dispatch(CellSelected(index))
    assert session.status_text() == "Player O wins!"
    assert session.tally.o_wins == 1


def test_draw_text_and_tally():
    session, _ = make_session()
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        session.dispatch(CellSelected(index))
    assert session.status_text() == "It's a draw!"
    assert session.tally.draws == 1


def test_invalid_move_is_a_no_op():
    session, _ = make_session()
    session.dispatch(CellSelected(4))
    before = session.state

    assert session.dispatch(CellSelected(4)) is None
    assert session.dispatch(CellSelected(9)) is None
    assert session.state == before


def test_scores_survive_restart_and_mode_switch():
    session, _ = make_session()
    for index in (0, 1, 3, 4, 6):
        session.dispatch(CellSelected(index))

    session.dispatch(Restart())
    assert session.state.board == [None] * 9
    assert session.last_outcome is None
    session.dispatch(SwitchMode(GameMode.VS_COMPUTER))
    assert session.mode == GameMode.VS_COMPUTER
    assert session.tally.as_dict() == {"x_wins": 1, "o_wins": 0, "draws": 0}


def test_unknown_command_raises():
    session, _ = make_session()
    try:
        session.dispatch("4")
        assert False, "unknown command accepted"
    except TypeError:
        pass


def test_on_change_called():
    changes = []
    session = SessionController(scheduler=QueueScheduler(), on_change=changes.append)
    session.dispatch(CellSelected(0))
    session.dispatch(Restart())
    assert len(changes) == 2
    assert changes[0] is session


# ==================== VS COMPUTER ====================

def test_computer_replies_after_delay():
    print("\n=== Testing Vs-Computer Session ===")
    session, scheduler = make_session(GameMode.VS_COMPUTER)
    assert session.status_text() == "Your turn (X)"

    assert session.dispatch(CellSelected(4)) == Continue(next_player=O)
    assert session.computer_pending
    assert session.status_text() == "Computer thinking..."
    assert len(scheduler.pending) == 1

    # Human cannot move while the computer is thinking
    assert session.dispatch(CellSelected(0)) is None
    assert session.state.board[0] is None

    assert scheduler.run_pending() == 1
    state = session.state
    assert mark_counts(state.board) == (1, 1)
    assert state.current_player == X
    assert not session.computer_pending
    assert session.status_text() == "Your turn (X)"


def test_computer_blocks_in_session():
    session, scheduler = make_session(GameMode.VS_COMPUTER)
    session.dispatch(CellSelected(0))
    scheduler.run_pending()
    o_cell = session.state.board.index(O)

    # Threaten a line the computer has not touched
    threat = next(
        (a, b, c) for a, b, c in [(0, 1, 2), (0, 3, 6), (0, 4, 8)]
        if o_cell not in (a, b, c)
    )
    session.dispatch(CellSelected(threat[1]))
    scheduler.run_pending()
    assert session.state.board[threat[2]] == O


def test_restart_cancels_pending_computer_move():
    session, scheduler = make_session(GameMode.VS_COMPUTER)
    session.dispatch(CellSelected(4))
    session.dispatch(Restart())

    assert not session.computer_pending
    assert scheduler.run_pending() == 0
    assert session.state.board == [None] * 9


def test_mode_switch_cancels_pending_computer_move():
    session, scheduler = make_session(GameMode.VS_COMPUTER)
    session.dispatch(CellSelected(4))
    session.dispatch(SwitchMode(GameMode.TWO_PLAYER))

    scheduler.run_pending()
    assert session.state.board == [None] * 9
    assert session.status_text() == "Player X's turn"


def test_stale_move_dropped_after_engine_reset():
    session, scheduler = make_session(GameMode.VS_COMPUTER)
    session.dispatch(CellSelected(4))

    # Reset behind the controller's back: token stays live, generation moves on
    session.engine.reset()
    assert scheduler.run_pending() == 1
    assert session.state.board == [None] * 9


class FakeWidget:
    """Stands in for a Tk widget: after() records instead of waiting."""

    def __init__(self):
        self.calls = []

    def after(self, delay_ms, func):
        self.calls.append((delay_ms, func))


def test_tk_scheduler_uses_configured_delay():
    widget = FakeWidget()
    config = SessionConfig()
    config.DEFAULT_MODE = GameMode.VS_COMPUTER
    session = SessionController(config=config, scheduler=TkScheduler(widget), rng=np.random.default_rng(0))

    session.dispatch(CellSelected(4))
    assert len(widget.calls) == 1
    delay_ms, func = widget.calls[0]
    assert delay_ms == config.COMPUTER_DELAY_MS

    func()
    assert mark_counts(session.state.board) == (1, 1)
    assert not session.computer_pending


def test_tk_scheduler_restart_drops_computer_move():
    widget = FakeWidget()
    config = SessionConfig()
    config.DEFAULT_MODE = GameMode.VS_COMPUTER
    session = SessionController(config=config, scheduler=TkScheduler(widget), rng=np.random.default_rng(0))

    session.dispatch(CellSelected(4))
    session.dispatch(Restart())

    _, func = widget.calls[0]
    func()
    assert session.state.board == [None] * 9
    assert not session.computer_pending
    assert session.status_text() == "Your turn (X)"


def test_computer_wins_text():
    session, _ = make_session(GameMode.VS_COMPUTER)
    for index in (0, 3, 1, 4, 8, 5):
        session.engine.apply_move(index)
    assert session.status_text() == "Computer wins!"
    assert session.tally.o_wins == 1


def test_computer_opens_when_playing_x():
    session, scheduler = make_session(
        GameMode.VS_COMPUTER,
        HUMAN_PLAYER=O,
        COMPUTER_PLAYER=X
    )
    assert session.computer_pending
    assert session.dispatch(CellSelected(4)) is None

    scheduler.run_pending()
    assert mark_counts(session.state.board) == (1, 0)
    assert session.status_text() == "Your turn (O)"


def test_full_games_against_computer():
    print("\n=== Testing Full Games ===")
    session, scheduler = make_session(GameMode.VS_COMPUTER, seed=3)
    for game in range(20):
        while not session.state.is_game_over:
            state = session.state
            session.dispatch(CellSelected(state.get_empty_cells()[0]))
            scheduler.run_pending()

            x_count, o_count = mark_counts(session.state.board)
            assert x_count - o_count in (0, 1)

        assert session.tally.games_played == game + 1
        session.dispatch(Restart())


# ==================== CONSOLE ====================

def test_parse_command():
    print("\n=== Testing Console ===")
    assert parse_command("4") == CellSelected(4)
    assert parse_command(" R ") == Restart()
    assert parse_command("p") == SwitchMode(GameMode.TWO_PLAYER)
    assert parse_command("c") == SwitchMode(GameMode.VS_COMPUTER)
    assert parse_command("hello") is None

    # Unicode digits that int() cannot parse
    assert parse_command("²") is None
    assert parse_command("4²") is None


def test_console_input():
    config = SessionConfig()
    config.COMPUTER_DELAY_MS = 0
    game = ConsoleGame(config=config)

    game.handle_input("4")
    assert game.session.state.board[4] == X
    game.handle_input("4")
    assert game.session.state.board[4] == X

    game.handle_input("²")
    assert game.session.state.board.count(None) == 8

    game.handle_input("c")
    assert game.session.mode == GameMode.VS_COMPUTER
    game.handle_input("0")
    game._run_computer_moves()
    assert mark_counts(game.session.state.board) == (1, 1)

    game.is_running = True
    game.handle_input("q")
    assert not game.is_running


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Session Tests")
    print("="*60)

    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]

    results = {}
    for name, func in tests:
        try:
            func()
            results[name] = True
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")

    print("="*60)

    if all(results.values()):
        print("\nAll tests passed!\n")
        return 0
    print("\nSome tests failed. Check the errors above.\n")
    return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
