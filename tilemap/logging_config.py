"""
Tilemap Autotile - Tool Logging

Library modules only create loggers under the 'tilemap' namespace. The
command line tools share --verbose and --log-file options and hand them to
configure_logging() once at startup.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "tilemap"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def add_logging_arguments(parser: argparse.ArgumentParser):
    """Add the --verbose and --log-file options shared by every tool."""
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging on stderr"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write debug logging to this file (overwritten on each run)",
    )


def configure_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Route 'tilemap' log records to stderr and/or a log file.

    Tool output goes to stdout, so console logging uses stderr and never
    mixes into printed tile rows. Calling this again replaces the handlers
    from the previous call; with neither option set the logger is left
    without handlers and only warnings reach the root logger.

    Args:
        verbose: Log DEBUG records to stderr
        log_file: Log DEBUG records, with timestamps, to this file

    Returns:
        The 'tilemap' logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if logger.handlers else logging.NOTSET)
    return logger
