"""Logging setup for the qr_link_generator package."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send package log records to stderr at the given level.

    Stdout is left to the console preview and the status line. Calling
    this again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("qr_link_generator")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
