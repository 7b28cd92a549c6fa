"""Logging configuration for console TicTacToe."""

import logging
import sys


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging for the whole application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    # stderr keeps diagnostics out of the game transcript
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return logging.getLogger(name)
