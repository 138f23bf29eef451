"""Logging setup for the load sensor process.

Stdout carries the scheduler protocol, so every log record goes to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send ``loadsensor`` log records to the current stderr at the given level.

    Raises ``ValueError`` for an unknown level name.
    """
    logger = logging.getLogger("loadsensor")
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, StderrHandler):
            logger.removeHandler(handler)

    logger.addHandler(StderrHandler())
    return logger
