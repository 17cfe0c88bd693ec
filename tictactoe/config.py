"""
Game configuration for the TicTacToe engine.
All the settings for the board, the players and the AI search.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3 with three-in-a-row to win.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    MAX_MOVES = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row by row

    # Marker stored in a cell nobody has played yet
    EMPTY_CELL = 99

    # ==================== PLAYER SETTINGS ====================
    # Display glyphs, indexed by player value (0 moves first)
    PLAYER_GLYPHS = ("X", "O")

    # ==================== AI SETTINGS ====================
    # Plies the search looks ahead before scoring a position as neutral.
    # Counted from the position being searched, not from the start of the game.
    MAX_DEPTH = 5

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
