"""
Logging setup for membership reconciliation.

Every line reads: 2026-01-06T14:05:52Z [source] LEVEL message

LOG_LEVEL picks the verbosity when no level is passed:
    INFO     index builds (roster size, unique surnames, build time)
    DEBUG    fuzzy surname hits and forename evidence per contact
    TRACE    every similarity comparison made while scanning the index
    WARNING / ERROR are accepted as well.

Modules log through ``logging.getLogger(__name__)``; TRACE records are
emitted with ``logger.log(TRACE, ...)``.

Usage:
    from reconciliation.logging_config import configure_logging

    configure_logging(source="matching")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime
from typing import TextIO

# Below DEBUG: one record per similarity comparison
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS_BY_NAME = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ISO8601Formatter(logging.Formatter):
    """Formatter stamping each record with its creation time in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "matching"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def level_from_env(debug: bool | None = None) -> int:
    """Resolve LOG_LEVEL; ``debug`` raises INFO to DEBUG. Unknown names mean INFO."""
    level = LEVELS_BY_NAME.get(os.getenv("LOG_LEVEL", "").strip().upper(), logging.INFO)
    if debug and level > logging.DEBUG:
        return logging.DEBUG
    return level


def configure_logging(
    source: str = "matching",
    level: int | None = None,
    debug: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install a single ISO8601 handler on the root logger.

    Args:
        source: Tag shown in brackets (e.g., "matching", "import")
        level: Explicit level; otherwise taken from LOG_LEVEL
        debug: Force at least DEBUG when LOG_LEVEL does not ask for more
        stream: Destination, stdout by default

    Returns:
        The root logger
    """
    if level is None:
        level = level_from_env(debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module name (typically ``__name__``)."""
    return logging.getLogger(name)
