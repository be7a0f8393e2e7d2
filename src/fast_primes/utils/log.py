"""Logger setup for the command-line tools."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "fast_primes"


def setup_logger(verbose: bool = False, log_path: Path | None = None) -> logging.Logger:
    """Set up the package logger for console and optional file output.

    Console output goes to stderr so it never mixes with command results on
    stdout.

    Args:
        verbose: Log DEBUG messages (cache growth) to the console.
        log_path: If given, also append everything at DEBUG level to this file.

    Returns:
        The configured ``fast_primes`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
