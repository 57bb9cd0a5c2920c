"""Logging helpers shared by every dstlist module."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the package logger. Repeat calls only adjust level and stream."""
    global _handler
    root = logging.getLogger("dstlist")
    root.setLevel(level)
    if _handler is not None:
        _handler.setStream(sys.stderr)
        return
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers are only installed by ``configure_logging``."""
    return logging.getLogger(name)
