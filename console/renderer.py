"""
Board renderer for console TicTacToe.
Draws the grid with row and column headers.
"""

from typing import List

from logic.board import Board


class BoardRenderer:
    """
    Turns a board into text.

    Only Board.size and Board.cell_value are used, so any board
    implementation with those two works here.

    Example (3x3):
           0 1 2
        0  X - O
        1  - X -
        2  O - -
    """

    def render(self, board: Board) -> str:
        """
        Render the board.

        Args:
            board: The board to draw.

        Returns:
            Multi-line string, header line first.
        """
        n = board.size
        # Wide enough for the largest index on big boards
        width = len(str(n - 1))

        header = " " * (width + 2) + " ".join(str(col).rjust(width) for col in range(n))
        lines: List[str] = [header]

        for row in range(n):
            cells = " ".join(
                str(board.cell_value(row, col)).rjust(width) for col in range(n)
            )
            lines.append(f"{str(row).rjust(width)}  {cells}")

        return "\n".join(lines)

    def show(self, board: Board):
        """Print the board to console."""
        print()
        print(self.render(board))
        print()
