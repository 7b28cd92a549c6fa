"""
Console configuration for TicTacToe.
Defaults for the board, the players and logging.
Command-line flags in main.py override these.
"""


class GameConfig:
    """
    Configuration class for a console game.
    Change these values to change the defaults!
    """

    # ==================== BOARD SETTINGS ====================
    DEFAULT_BOARD_SIZE = 3
    # Only "standard" exists for now
    DEFAULT_VARIANT = "standard"

    # ==================== PLAYER SETTINGS ====================
    PLAYER1_NAME = "Henry"
    PLAYER1_SYMBOL = "X"
    PLAYER2_NAME = "John"
    PLAYER2_SYMBOL = "O"

    # ==================== OUTPUT SETTINGS ====================
    INFO_PREFIX = "[INFO]"
    TITLE = "TIC TAC TOE"

    # ==================== LOGGING SETTINGS ====================
    # Diagnostics only; game output always goes to the console
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "simple"
