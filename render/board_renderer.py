"""
Board renderer for TicTacToe.
Draws a GameState into a Pillow image and maps pixels back to cells.
"""

from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from logic.game_state import BOARD_CELLS, BOARD_SIDE, GameState, Player
from .config import RenderConfig


class BoardRenderer:
    """
    Draws the 3x3 board.

    Layout matches the cell indices: 0-2 top row, 3-5 middle, 6-8 bottom.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()

    @property
    def size(self) -> int:
        return self.config.CELL_SIZE_PX * BOARD_SIDE

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel box of a cell.

        Returns:
            (left, top, right, bottom)
        """
        cell = self.config.CELL_SIZE_PX
        row, col = divmod(index, BOARD_SIDE)
        left, top = col * cell, row * cell
        return left, top, left + cell, top + cell

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Map a pixel (e.g. a mouse click) to a cell index.

        Returns:
            Index 0-8, or None if the point is outside the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        cell = self.config.CELL_SIZE_PX
        return (y // cell) * BOARD_SIDE + (x // cell)

    def render(self, state: GameState) -> Image.Image:
        """
        Draw the board.

        Args:
            state: Game state to draw.

        Returns:
            An RGB image of size x size pixels.
        """
        cfg = self.config
        image = Image.new("RGB", (self.size, self.size), cfg.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        # Highlight first so grid and marks stay on top
        if state.winning_line:
            for index in state.winning_line:
                draw.rectangle(self.cell_bounds(index), fill=cfg.WINNING_CELL_COLOR)

        self._draw_grid(draw)

        for index in range(BOARD_CELLS):
            mark = state.board[index]
            if mark == Player.X:
                self._draw_x(draw, index)
            elif mark == Player.O:
                self._draw_o(draw, index)

        return image

    def save(self, state: GameState, path) -> Path:
        """
        Save a PNG snapshot of the board.

        Returns:
            The path written.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(state).save(path, format="PNG")
        return path

    def _draw_grid(self, draw: ImageDraw.ImageDraw):
        cfg = self.config
        for i in range(1, BOARD_SIDE):
            offset = i * cfg.CELL_SIZE_PX
            draw.line([(offset, 0), (offset, self.size)], fill=cfg.GRID_COLOR, width=cfg.GRID_LINE_WIDTH)
            draw.line([(0, offset), (self.size, offset)], fill=cfg.GRID_COLOR, width=cfg.GRID_LINE_WIDTH)

    def _mark_box(self, index: int) -> Tuple[int, int, int, int]:
        pad = self.config.MARK_PADDING_PX
        left, top, right, bottom = self.cell_bounds(index)
        return left + pad, top + pad, right - pad, bottom - pad

    def _draw_x(self, draw: ImageDraw.ImageDraw, index: int):
        left, top, right, bottom = self._mark_box(index)
        width = self.config.MARK_LINE_WIDTH
        draw.line([(left, top), (right, bottom)], fill=self.config.X_COLOR, width=width)
        draw.line([(left, bottom), (right, top)], fill=self.config.X_COLOR, width=width)

    def _draw_o(self, draw: ImageDraw.ImageDraw, index: int):
        draw.ellipse(
            self._mark_box(index),
            outline=self.config.O_COLOR,
            width=self.config.MARK_LINE_WIDTH
        )
