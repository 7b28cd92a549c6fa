"""
Logic module for console TicTacToe.
Handles the board, rules, players and the game session.
"""

__version__ = "1.0.0"

from .board import Board, Marker, EMPTY
from .player import Player
from .rules import Rules, StandardRules, MoveValidation, RULE_VARIANTS
from .notifications import NotificationSink, ConsoleNotifier, RecordingNotifier
from .game_session import GameSession, SessionState, Move, MoveResult, create_session
