"""
Game configuration for TicTacToe.
Board layout, display characters and AI settings.
"""


class GameConfig:
    """
    Configuration for the game and the computer opponent.

    Command line flags in main.py override DEBUG_MODE and RANDOM_SEED.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, squares indexed 0-8 row by row
    BOARD_SIZE = 3
    NUM_SQUARES = BOARD_SIZE * BOARD_SIZE  # 9

    # X always moves first
    FIRST_PLAYER = "X"

    # Human readable name for each square index
    SQUARE_NAMES = [
        "Top Left",
        "Top Middle",
        "Top Right",
        "Middle Left",
        "Middle",
        "Middle Right",
        "Bottom Left",
        "Bottom Middle",
        "Bottom Right",
    ]

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_CHAR = "."
    CELL_DIVIDER = "|"
    ROW_DIVIDER = "---|---|---"

    # ==================== AI SETTINGS ====================
    # Seed for choosing between equally good moves (None = random games)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every computer move
    DEBUG_MODE = False
