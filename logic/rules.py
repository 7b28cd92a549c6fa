"""
Rules for console TicTacToe.
Decides move legality, wins and draws for a board.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

from .board import EMPTY, Board, Marker


@dataclass
class MoveValidation:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class Rules(ABC):
    """
    A rule variant.

    Board only stores markers; everything about what a legal move,
    a win or a draw means lives behind this interface.
    """

    @abstractmethod
    def is_valid_move(self, board: Board, row: int, col: int) -> bool:
        ...

    @abstractmethod
    def has_winner(self, board: Board, marker: Marker) -> bool:
        ...

    @abstractmethod
    def is_draw(self, board: Board) -> bool:
        ...

    def validate_move(self, board: Board, row: int, col: int) -> MoveValidation:
        """
        Validate a move and explain why it was refused.

        Args:
            board: The game board.
            row: Row to place the marker.
            col: Column to place the marker.

        Returns:
            MoveValidation with is_valid and error_message.
        """
        if self.is_valid_move(board, row, col):
            return MoveValidation(is_valid=True)

        if not board.in_bounds(row, col):
            return MoveValidation(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}."
            )

        return MoveValidation(
            is_valid=False,
            error_message=f"Cell ({row}, {col}) is already occupied by {board.cell_value(row, col)}"
        )

    def valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves on the board.

        Returns:
            List of (row, col) valid move positions.
        """
        return [
            (row, col) for row, col in board.empty_cells()
            if self.is_valid_move(board, row, col)
        ]


class StandardRules(Rules):
    """
    Classic TicTacToe rules on an n x n board.

    Win condition: a full row, a full column or either diagonal
    holding only the player's marker.
    Draw condition: no empty cell left. The winner is not consulted
    here, so callers must check has_winner first.
    """

    def is_valid_move(self, board: Board, row: int, col: int) -> bool:
        return board.is_empty(row, col)

    def has_winner(self, board: Board, marker: Marker) -> bool:
        """
        Check if a marker owns a complete line.

        Args:
            board: The game board.
            marker: The marker to look for.

        Returns:
            True if any row, column or diagonal is all `marker`.
        """
        if marker == EMPTY:
            return False

        return self.winning_line(board, marker) is not None

    def is_draw(self, board: Board) -> bool:
        n = board.size
        for row in range(n):
            for col in range(n):
                if board.cell_value(row, col) == EMPTY:
                    return False
        return True

    def winning_line(
        self,
        board: Board,
        marker: Marker
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first complete line of `marker`.

        Rows are scanned first, then columns, then the main diagonal
        and finally the anti-diagonal.

        Returns:
            The line as a list of (row, col), or None.
        """
        for line in self._lines(board.size):
            if self._check_line(board, line, marker):
                return line
        return None

    def _lines(self, n: int) -> List[List[Tuple[int, int]]]:
        """All candidate lines for a board of side n."""
        rows = [[(row, col) for col in range(n)] for row in range(n)]
        cols = [[(row, col) for row in range(n)] for col in range(n)]
        main_diagonal = [(i, i) for i in range(n)]
        anti_diagonal = [(i, n - 1 - i) for i in range(n)]
        return rows + cols + [main_diagonal, anti_diagonal]

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]],
        marker: Marker
    ) -> bool:
        for row, col in line:
            if board.cell_value(row, col) != marker:
                return False  # Stop at the first mismatch
        return True


# Rule variant identifiers accepted by create_session
RULE_VARIANTS: Dict[str, Type[Rules]] = {
    "standard": StandardRules,
}
