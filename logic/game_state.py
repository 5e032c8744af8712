"""
Game state for a TicTacToe session.
Tracks the board, current player, mode and game status.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# Cells per row and column
BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE


class Player(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameMode(Enum):
    """Who plays O."""
    TWO_PLAYER = "pvp"
    VS_COMPUTER = "pvc"


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# A cell is None when empty, otherwise the Player who marked it
Board = List[Optional[Player]]


def empty_board() -> Board:
    return [None] * BOARD_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell is None]


def mark_counts(board: Board) -> Tuple[int, int]:
    """Return (x_count, o_count) for a board."""
    x_count = sum(1 for cell in board if cell == Player.X)
    o_count = sum(1 for cell in board if cell == Player.O)
    return x_count, o_count


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9 cells, row-major (0-2 top row, 3-5 middle, 6-8 bottom)
    - Current player
    - Game status (in progress, won, draw) and the winning line
    - Mode (two players or vs computer)
    """

    board: Board = field(default_factory=empty_board)
    current_player: Player = Player.X
    status: GameStatus = GameStatus.IN_PROGRESS
    mode: GameMode = GameMode.TWO_PLAYER

    # Set when status is WON
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    move_count: int = 0

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            status=self.status,
            mode=self.mode,
            winner=self.winner,
            winning_line=self.winning_line,
            move_count=self.move_count,
        )

    def format_board(self) -> str:
        """
        Render the board as text, empty cells shown by their index.

        Returns:
            A three-line string like " X | 1 | O".
        """
        rows = []
        for start in range(0, BOARD_CELLS, BOARD_SIDE):
            cells = []
            for i in range(start, start + BOARD_SIDE):
                cell = self.board[i]
                cells.append(cell.value if cell is not None else str(i))
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS! Line: {list(self.winning_line)}")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
