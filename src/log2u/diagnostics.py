# src/log2u/diagnostics.py
"""
Internal diagnostics logger for log2u.

The package notes its own degraded paths (dropped sink writes, unreadable
settings files) here, never on the user's sink. Nothing is configured on
import; call setup_logging() to see the notes on the console.
"""

import logging
import sys

from log2u.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(debug: bool = False, stream=None):
    """Configure diagnostics output."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Formatter
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console Handler
    ch = logging.StreamHandler(stream or sys.stderr)
    ch.setFormatter(formatter)
    ch.setLevel(logging.DEBUG if debug else logging.INFO)

    # Clear existing handlers to avoid duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(ch)

    logger.debug("Diagnostics initialized (debug mode: %s)", debug)
    return logger
