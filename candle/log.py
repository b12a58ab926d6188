"""Engine and client loggers writing to standard output."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_core: logging.Logger | None = None
_client: logging.Logger | None = None


class _ConsoleHandler(logging.StreamHandler):
    """Handler installed by :func:`init`."""


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            logger.removeHandler(handler)
    handler = _ConsoleHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init() -> None:
    """Set up the ``CANDLE`` and ``APP`` loggers at trace level."""
    global _core, _client
    _core = _configure("CANDLE")
    _client = _configure("APP")


def core_logger() -> logging.Logger | None:
    """The engine logger, or None before :func:`init`."""
    return _core


def client_logger() -> logging.Logger | None:
    """The application logger, or None before :func:`init`."""
    return _client