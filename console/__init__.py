"""
Console module for TicTacToe.
Handles configuration, board rendering, keyboard input and logging.
"""

from .config import GameConfig
from .renderer import BoardRenderer
from .move_source import ConsoleMoveSource
from .logging_setup import setup_logging, get_logger
