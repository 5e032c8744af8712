"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8   mark that cell
    r     restart (scores are kept)
    p     switch to two-player mode
    c     switch to vs-computer mode
    s     save a PNG snapshot of the board
    q     quit
"""

import time
from typing import Optional

from logic.engine import Draw, Won
from logic.game_state import GameMode
from render.board_renderer import BoardRenderer
from session.commands import CellSelected, Command, Restart, SwitchMode
from session.config import SessionConfig
from session.controller import SessionController
from session.scheduler import QueueScheduler


MODES = {
    "pvp": GameMode.TWO_PLAYER,
    "pvc": GameMode.VS_COMPUTER,
}


def parse_command(text: str) -> Optional[Command]:
    """
    Turn a line of console input into a session command.

    Returns:
        The command, or None if the text is not one (including q/s,
        which the console handles itself).
    """
    text = text.strip().lower()
    if text.isdecimal():
        try:
            return CellSelected(int(text))
        except ValueError:
            return None
    if text == "r":
        return Restart()
    if text == "p":
        return SwitchMode(GameMode.TWO_PLAYER)
    if text == "c":
        return SwitchMode(GameMode.VS_COMPUTER)
    return None


class ConsoleGame:
    """
    Console front end for a TicTacToe session.

    Game flow:
    1. Print board, status and scores
    2. Read a command and dispatch it
    3. If a computer move was scheduled, wait the delay and run it
    4. Repeat until the user quits
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self.scheduler = QueueScheduler()
        self.session = SessionController(config=self.config, scheduler=self.scheduler)
        self.renderer = BoardRenderer()
        self.is_running = False

    def start(self):
        """Start the console loop."""
        print("\n" + "="*60)
        print("   TicTacToe")
        print("   Cells: 0-8 | r restart | p two players | c vs computer")
        print("   s save snapshot | q quit")
        print("="*60)

        self.is_running = True
        while self.is_running:
            self._run_computer_moves()
            self._show()

            try:
                text = input("> ")
            except EOFError:
                break

            self.handle_input(text)

    def handle_input(self, text: str):
        """Process one line of input."""
        text = text.strip().lower()
        if text == "q":
            self.is_running = False
            return
        if text == "s":
            self._save_snapshot()
            return

        command = parse_command(text)
        if command is None:
            print("Unknown command. Type 0-8, r, p, c, s or q.")
            return

        if isinstance(command, CellSelected):
            outcome = self.session.dispatch(command)
            if outcome is None:
                print("Illegal move. Try again.")
            else:
                self._announce(outcome)
        else:
            self.session.dispatch(command)

    def _run_computer_moves(self):
        """Wait out the delay and let any scheduled computer move play."""
        while self.scheduler.pending:
            time.sleep(self.scheduler.next_delay_ms / 1000.0)
            self.scheduler.run_pending()
            self._announce(self.session.last_outcome)

    def _announce(self, outcome):
        if isinstance(outcome, (Won, Draw)):
            print(f"\n*** {self.session.status_text()} ***")

    def _show(self):
        self.session.state.print_board()
        tally = self.session.tally
        print(f"{self.session.status_text()}  |  X: {tally.x_wins}  O: {tally.o_wins}  Draws: {tally.draws}")

    def _save_snapshot(self):
        path = f"{self.config.SNAPSHOT_DIR}/tictactoe_{int(time.time())}.png"
        saved = self.renderer.save(self.session.state, path)
        print(f"Saved: {saved}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="pvp",
        help="pvp: two players, pvc: play against the computer"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=SessionConfig.COMPUTER_DELAY_MS,
        help="Pause before the computer answers"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print session debug messages"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    config = SessionConfig()
    config.DEFAULT_MODE = MODES[args.mode]
    config.RANDOM_SEED = args.seed
    config.COMPUTER_DELAY_MS = max(0, args.delay_ms)
    config.DEBUG_MODE = args.debug

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config=config)
        ui.run()
        return

    game = ConsoleGame(config=config)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
