"""
Keyboard move source for console TicTacToe.
Asks the current player for a row and a column.
"""

from typing import Callable, Optional, Tuple

from logic.player import Player


class ConsoleMoveSource:
    """
    Reads moves as two integers, e.g. "1 2".

    Only parsing happens here. Whether the position is on the board
    or free is for the rules to decide.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the move source.

        Args:
            input_fn: Reads one line after showing a prompt.
            output_fn: Shows parse errors to the player.
        """
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def __call__(self, player: Player) -> Tuple[int, int]:
        """
        Block until the player enters a move.

        Args:
            player: The player whose turn it is.

        Returns:
            (row, col) as typed; may be off the board.

        Raises:
            EOFError: If input runs out.
        """
        while True:
            line = self.input_fn(f"{player.label} - Enter row and column: ")
            move = self.parse(line)
            if move is not None:
                return move
            self.output_fn("Please enter two numbers, e.g. 1 2")

    @staticmethod
    def parse(line: str):
        """Parse "row col" (spaces or a comma), or return None."""
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None
