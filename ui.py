"""
TicTacToe UI
A graphical interface for a TicTacToe session using Tkinter.

Shows:
- The board (drawn with Pillow, click a cell to play)
- Game status and score counters
- Mode selection (two players / vs computer)
"""

import time
import tkinter as tk
from tkinter import ttk
from typing import Optional

import numpy as np
from PIL import ImageTk

from logic.game_state import GameMode
from render.board_renderer import BoardRenderer
from render.config import RenderConfig
from session.commands import CellSelected, Restart, SwitchMode
from session.config import SessionConfig
from session.controller import SessionController
from session.scheduler import TkScheduler


# Selected / unselected mode button colours
ACTIVE_MODE_COLOR = '#45a049'
IDLE_MODE_COLOR = '#4CAF50'


class TicTacToeUI:
    """
    Main UI class. Turns clicks into session commands and redraws on change.
    """

    def __init__(self, config: Optional[SessionConfig] = None, render_config: Optional[RenderConfig] = None):
        """Initialize the UI."""
        self.config = config or SessionConfig()
        self.renderer = BoardRenderer(render_config)
        self._photo: Optional[ImageTk.PhotoImage] = None

        self._create_ui()

        self.session = SessionController(
            config=self.config,
            scheduler=TkScheduler(self.root),
            rng=np.random.default_rng(self.config.RANDOM_SEED),
            on_change=self._on_session_change
        )
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))

        # Mode buttons
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_buttons = {}
        for text, mode in (("Two Players", GameMode.TWO_PLAYER), ("Vs Computer", GameMode.VS_COMPUTER)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=12,
                bg=IDLE_MODE_COLOR,
                fg='white',
                command=lambda m=mode: self.session.dispatch(SwitchMode(m))
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board canvas
        size = self.renderer.size
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size, highlightthickness=2,
                                      highlightbackground='#00d4ff')
        self.board_canvas.pack(pady=5)
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Scores
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)
        self.x_wins_label = ttk.Label(score_frame, text="X: 0")
        self.x_wins_label.pack(side=tk.LEFT, padx=10)
        self.o_wins_label = ttk.Label(score_frame, text="O: 0")
        self.o_wins_label.pack(side=tk.LEFT, padx=10)
        self.draws_label = ttk.Label(score_frame, text="Draws: 0")
        self.draws_label.pack(side=tk.LEFT, padx=10)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=lambda: self.session.dispatch(Restart())
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Save",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=10,
            command=self._save_snapshot
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Translate a canvas click into a cell selection."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is not None:
            self.session.dispatch(CellSelected(index))

    def _on_session_change(self, session: SessionController):
        self._refresh()

    def _refresh(self):
        """Redraw board, status, scores and mode buttons."""
        state = self.session.state

        image = self.renderer.render(state)
        self._photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)

        self.status_label.configure(text=self.session.status_text())

        tally = self.session.tally
        self.x_wins_label.configure(text=f"X: {tally.x_wins}")
        self.o_wins_label.configure(text=f"O: {tally.o_wins}")
        self.draws_label.configure(text=f"Draws: {tally.draws}")

        for mode, btn in self.mode_buttons.items():
            btn.configure(bg=ACTIVE_MODE_COLOR if mode == self.session.mode else IDLE_MODE_COLOR)

    def _save_snapshot(self):
        path = f"{self.config.SNAPSHOT_DIR}/tictactoe_{int(time.time())}.png"
        saved = self.renderer.save(self.session.state, path)
        print(f"Saved: {saved}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
