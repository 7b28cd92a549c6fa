"""
Game session for console TicTacToe.
Owns the board and rules, rotates players and drives the turn loop.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional, Tuple

from .board import EMPTY, Board
from .notifications import NotificationSink
from .player import Player
from .rules import RULE_VARIANTS, Rules

logger = logging.getLogger(__name__)


MIN_PLAYERS = 2

START_REFUSED_MESSAGE = "At least two players are required to start the game."
INVALID_MOVE_MESSAGE = "Invalid move. Please try again."
GAME_OVER_MESSAGE = "Game is already over!"
NOT_STARTED_MESSAGE = "Game has not started yet!"


class SessionState(Enum):
    """Where a session is in its lifecycle."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class Move:
    """
    An accepted move.
    """
    player: Player          # Who made the move
    row: int                # Row index
    col: int                # Column index
    move_number: int        # 0-based position in the game


@dataclass
class MoveResult:
    """Outcome of submitting a move."""
    accepted: bool
    message: Optional[str] = None
    finished: bool = False


# Supplies (row, col) for the player whose turn it is
MoveSource = Callable[[Player], Tuple[int, int]]


class GameSession:
    """
    One game of TicTacToe.

    Flow:
    1. Players and observers are registered
    2. start() needs at least two players
    3. The front of the rotation submits moves until one wins
       or the board is full
    4. After a move that does not end the game, the acting player
       goes to the back of the rotation

    Invalid moves are returned to the caller only and never broadcast.
    """

    def __init__(self, size: int, rules: Rules):
        """
        Create a session.

        Args:
            size: Board side length.
            rules: The rule variant to play with.
        """
        self._board = Board(size)
        self._rules = rules
        self._rotation: Deque[Player] = deque()
        self._observers: List[NotificationSink] = []
        self._moves: List[Move] = []
        self._state = SessionState.NOT_STARTED
        self._winner: Optional[Player] = None
        self._is_draw = False

    # ==================== ACCESSORS ====================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def players(self) -> List[Player]:
        """Snapshot of the rotation, current player first."""
        return list(self._rotation)

    @property
    def moves(self) -> List[Move]:
        return list(self._moves)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def is_finished(self) -> bool:
        return self._state == SessionState.FINISHED

    @property
    def current_player(self) -> Optional[Player]:
        """The player whose turn it is, or None with no players."""
        if not self._rotation:
            return None
        return self._rotation[0]

    # ==================== SETUP ====================

    def add_player(self, player: Player):
        """
        Add a player to the back of the rotation.

        Raises:
            ValueError: If play has started or the marker is taken.
        """
        if self._state != SessionState.NOT_STARTED:
            raise ValueError("Players can only be added before the game starts")

        if player.marker == EMPTY:
            raise ValueError(f"{player.name} cannot use the empty marker")

        for other in self._rotation:
            if other is player:
                raise ValueError(f"{player.name} is already in this game")
            if other.marker == player.marker:
                raise ValueError(
                    f"Marker {player.marker} is already used by {other.name}"
                )

        self._rotation.append(player)

    def add_observer(self, observer: NotificationSink):
        self._observers.append(observer)

    def notify(self, message: str):
        """Send a message to every observer, in registration order."""
        for observer in self._observers:
            observer.notify(message)

    # ==================== PLAY ====================

    def start(self) -> bool:
        """
        Start the game.

        Returns:
            True if the game started. False if it was already started
            or fewer than two players are registered; the session is
            left unchanged in that case.
        """
        if self._state != SessionState.NOT_STARTED:
            logger.warning("start() called on a session that is %s", self._state.value)
            return False

        if len(self._rotation) < MIN_PLAYERS:
            logger.warning("Refusing to start with %d player(s)", len(self._rotation))
            return False

        self._state = SessionState.IN_PROGRESS
        logger.debug("Session started with %s", [p.name for p in self._rotation])
        self.notify("Game started.")
        return True

    def submit_move(self, row: int, col: int) -> MoveResult:
        """
        Play a move for the current player.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            MoveResult telling whether the move was accepted and
            whether it ended the game.
        """
        if self._state == SessionState.FINISHED:
            return MoveResult(accepted=False, message=GAME_OVER_MESSAGE, finished=True)

        if self._state == SessionState.NOT_STARTED:
            return MoveResult(accepted=False, message=NOT_STARTED_MESSAGE)

        current = self._rotation[0]

        validation = self._rules.validate_move(self._board, row, col)
        if not validation.is_valid:
            logger.debug("Rejected move by %s: %s", current.name, validation.error_message)
            return MoveResult(accepted=False, message=INVALID_MOVE_MESSAGE)

        self._board.place(row, col, current.marker)
        self._moves.append(Move(
            player=current,
            row=row,
            col=col,
            move_number=len(self._moves)
        ))
        self.notify(f"{current.name} played at ({row},{col}).")

        # Winner first: a full board with a winning line is a win
        if self._rules.has_winner(self._board, current.marker):
            self._finish(winner=current)
            current.increment_score()
            self.notify(f"{current.name} has won the game.")
            return MoveResult(accepted=True, message=f"{current.name} wins the match!", finished=True)

        if self._rules.is_draw(self._board):
            self._finish(winner=None)
            self.notify("The game ended in a draw.")
            return MoveResult(accepted=True, message="Match ended in a draw.", finished=True)

        self._rotation.rotate(-1)
        return MoveResult(accepted=True)

    def play(
        self,
        move_source: MoveSource,
        prompt: Callable[[str], None] = print,
        render: Optional[Callable[[Board], None]] = None
    ) -> bool:
        """
        Run the game loop until the game is over.

        Args:
            move_source: Blocking call returning (row, col) for a player.
            prompt: Channel for messages meant only for the player at
                the keyboard (invalid moves, final result).
            render: Optional board renderer, called at the start and
                after every accepted move.

        Returns:
            True if the game was played to the end, False if it
            could not start or was already over.
        """
        if self._state == SessionState.FINISHED:
            prompt(GAME_OVER_MESSAGE)
            return False

        if self._state == SessionState.NOT_STARTED and not self.start():
            prompt(START_REFUSED_MESSAGE)
            return False

        result = MoveResult(accepted=False)
        while not self.is_finished:
            if render is not None:
                render(self._board)

            player = self._rotation[0]
            row, col = move_source(player)
            result = self.submit_move(row, col)

            if not result.accepted:
                prompt(result.message)

        if render is not None:
            render(self._board)
        prompt(result.message)
        return True

    def _finish(self, winner: Optional[Player]):
        self._state = SessionState.FINISHED
        self._winner = winner
        self._is_draw = winner is None
        logger.debug(
            "Session finished after %d moves: %s",
            len(self._moves),
            f"won by {winner.name}" if winner else "draw"
        )


def create_session(variant: str, size: int) -> Optional[GameSession]:
    """
    Build a session for a rule variant.

    Args:
        variant: Rule variant identifier (see RULE_VARIANTS).
        size: Board side length.

    Returns:
        A new GameSession, or None if the variant is unknown.
    """
    rules_class = RULE_VARIANTS.get(variant)
    if rules_class is None:
        logger.warning("Unknown rule variant: %r", variant)
        return None

    return GameSession(size, rules_class())
