"""Logging setup shared by the engine, stores and the terminal front end."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

# HTTP client loggers that are chatty at INFO/DEBUG during NYT fetches.
QUIET_LOGGERS = ("urllib3", "requests")


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Send log records to ``stream`` (stderr by default), one line each.

    The board is drawn on stdout, so records never go there unless asked.
    Every keystroke can produce a debug record (ignored keys, rejected
    moves), which is why the terminal front end usually runs at ``WARNING``.
    """

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt="%(levelname)-7s %(name)s: %(message)s")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    return logging.getLogger(name or "cluegrid")
