"""
Render configuration for TicTacToe.
Sizes and colours used to draw the board.
"""


class RenderConfig:
    """
    Configuration class for board drawing.
    Colours are RGB tuples.
    """

    # ==================== GEOMETRY ====================
    CELL_SIZE_PX = 120
    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10

    # Gap between a mark and the cell border
    MARK_PADDING_PX = 24

    # ==================== COLOURS ====================
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (51, 51, 51)
    X_COLOR = (231, 76, 60)
    O_COLOR = (52, 152, 219)

    # Cells of the completed line
    WINNING_CELL_COLOR = (144, 238, 144)
