"""
Board for console TicTacToe.
Holds the n x n grid of markers with bounds-checked access.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True)
class Marker:
    """
    A player's symbol on the board.

    Two markers with the same symbol are equal.
    """
    symbol: str

    def __post_init__(self):
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise ValueError(f"Marker must be a single character, got {self.symbol!r}")

    def __str__(self) -> str:
        return self.symbol


# The empty cell sentinel - never assigned to a player
EMPTY = Marker("-")


class Board:
    """
    Square grid of markers.

    Every cell starts as EMPTY. Reads outside the grid return EMPTY
    and writes outside the grid are rejected, so edge and diagonal
    scans never need their own bounds checks.
    """

    def __init__(self, size: int):
        """
        Create an empty board.

        Args:
            size: Side length of the board (must be >= 1).
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")

        self._size = size
        self._grid = np.full((size, size), EMPTY, dtype=object)

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self._size

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def is_empty(self, row: int, col: int) -> bool:
        """
        Check whether a cell can take a marker.

        Returns:
            False for occupied cells and for positions off the board.
        """
        if not self.in_bounds(row, col):
            return False
        return self._grid[row, col] == EMPTY

    def place(self, row: int, col: int, marker: Marker) -> bool:
        """
        Put a marker on an empty cell.

        Args:
            row: Row index.
            col: Column index.
            marker: The marker to place.

        Returns:
            True if the marker was placed, False if the cell is
            occupied or off the board (board unchanged).
        """
        if marker == EMPTY:
            return False

        if not self.is_empty(row, col):
            return False

        self._grid[row, col] = marker
        return True

    def cell_value(self, row: int, col: int) -> Marker:
        """Get the marker at a cell, or EMPTY when off the board."""
        if not self.in_bounds(row, col):
            return EMPTY
        return self._grid[row, col]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty_mask = self._grid == EMPTY
        return [(int(row), int(col)) for row, col in np.argwhere(empty_mask)]

    def is_full(self) -> bool:
        return not bool((self._grid == EMPTY).any())

    def rows(self) -> List[List[Marker]]:
        """The grid as a list of rows, for renderers."""
        return [list(row) for row in self._grid]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self._size)
        new_board._grid = self._grid.copy()
        return new_board

    def __repr__(self) -> str:
        return f"Board(size={self._size}, empty={len(self.empty_cells())})"
