"""
Players for console TicTacToe.
"""

from dataclasses import dataclass

from .board import EMPTY, Marker


@dataclass(eq=False)
class Player:
    """
    A participant in the game.

    Players are created by the caller and only referenced by a
    GameSession, so the score carries over between sessions.
    """
    player_id: int          # Caller-assigned identifier
    name: str               # Display name used in messages
    marker: Marker          # Symbol placed on the board
    score: int = 0          # Games won

    def __post_init__(self):
        if self.marker == EMPTY:
            raise ValueError(f"{self.name} cannot use the empty marker {EMPTY}")
        if self.score < 0:
            raise ValueError("Score cannot be negative")

    @property
    def label(self) -> str:
        """Name with symbol, e.g. "Henry (X)"."""
        return f"{self.name} ({self.marker})"

    def increment_score(self):
        self.score += 1
