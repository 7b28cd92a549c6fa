"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, rules, players, game session)
- Console (board rendering, keyboard input, logging)

Run this script to play TicTacToe against a friend at the same keyboard!
"""

import argparse
import sys
from typing import Callable, List, Optional

from console.config import GameConfig
from console.logging_setup import setup_logging, get_logger
from console.move_source import ConsoleMoveSource
from console.renderer import BoardRenderer
from logic.board import Marker
from logic.game_session import GameSession, create_session
from logic.notifications import ConsoleNotifier
from logic.player import Player

logger = get_logger(__name__)


def ask_board_size(input_fn: Optional[Callable[[str], str]] = None) -> Optional[int]:
    """
    Ask for the board size.

    Returns:
        The size typed, or None if it is not a number.
    """
    answer = (input_fn or input)("Enter board size: ").strip()
    try:
        return int(answer)
    except ValueError:
        return None


def build_session(
    variant: str,
    size: int,
    players: List[Player],
    config: GameConfig
) -> Optional[GameSession]:
    """
    Create a session with a console notifier and the given players.

    Returns:
        The session, or None if the variant is unknown.
    """
    session = create_session(variant, size)
    if session is None:
        return None

    session.add_observer(ConsoleNotifier(prefix=config.INFO_PREFIX))
    for player in players:
        session.add_player(player)
    return session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    config = GameConfig

    parser = argparse.ArgumentParser(description="Console TicTacToe for two players")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Board size (asked interactively if omitted)"
    )
    parser.add_argument(
        "--variant",
        default=config.DEFAULT_VARIANT,
        help=f"Rule variant (default: {config.DEFAULT_VARIANT})"
    )
    parser.add_argument(
        "--player1",
        default=config.PLAYER1_NAME,
        help=f"Name of the first player, plays {config.PLAYER1_SYMBOL}"
    )
    parser.add_argument(
        "--player2",
        default=config.PLAYER2_NAME,
        help=f"Name of the second player, plays {config.PLAYER2_SYMBOL}"
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Diagnostics level (DEBUG, INFO, WARNING, ...)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = GameConfig()

    setup_logging(level=args.log_level, format_style=config.LOG_FORMAT)

    print(config.TITLE)

    try:
        size = args.size if args.size is not None else ask_board_size()
        if size is None or size <= 0:
            print("Board size must be a positive number.")
            return 1

        players = [
            Player(1, args.player1, Marker(config.PLAYER1_SYMBOL)),
            Player(2, args.player2, Marker(config.PLAYER2_SYMBOL)),
        ]

        session = build_session(args.variant, size, players, config)
        if session is None:
            print(f"Unknown rule variant: {args.variant}")
            return 1

        renderer = BoardRenderer()
        session.play(ConsoleMoveSource(), prompt=print, render=renderer.show)

        for player in players:
            logger.info("%s score: %d", player.name, player.score)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
