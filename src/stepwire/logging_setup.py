from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "stepwire"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING", *, stream: TextIO | None = None) -> logging.Logger:
    """Send ``stepwire`` logs to stderr at ``level``.

    stdout carries the wire protocol, so nothing here may write to it.
    Calling this again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    already_configured = any(getattr(h, "_stepwire_handler", False) for h in logger.handlers)
    if not already_configured:
        handler = logging.StreamHandler(stream=stream or sys.stderr)
        handler._stepwire_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
