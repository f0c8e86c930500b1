"""
Game configuration for TicTacToe.
All the settings for the board, symbols, and the minimax search.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to adjust the console game!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (other sizes are not supported)
    BOARD_SIZE = 3

    # ==================== SYMBOLS ====================
    # Symbols shown on the board for each mark
    FIRST_SYMBOL = "X"    # Always moves first
    SECOND_SYMBOL = "O"
    EMPTY_SYMBOL = " "

    # Cell separator used when drawing the board
    CELL_SEPARATOR = "|"

    # Token that selects the second mark at game start.
    # Exact, case-sensitive match; anything else gives the human the first mark.
    SECOND_MARK_TOKEN = "O"

    # ==================== SEARCH SETTINGS ====================
    # Scores from the agent's point of view
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # Starting best score for the search (true scores are in {-1, 0, 1})
    SEARCH_SENTINEL = 1000

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
