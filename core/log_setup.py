"""
log_setup.py - Logging Setup

Warnings and errors go to stderr through the standard logging module,
progress and previews stay on stdout.
"""

import logging
import sys
from typing import Optional

_HANDLER_NAME = "audiotool-console"
_FORMAT = "%(levelname)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger with the given name, or this module's name if None.

    Args:
        name: Optional logger name (usually the caller's __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or __name__)


def configure_logging(level: int = logging.INFO, stream=None) -> logging.Handler:
    """
    Install a console handler on the root logger

    Calling it again replaces the handler installed by the previous call,
    so the entry point can run more than once in one process.

    Args:
        level: Minimum level written to the console
        stream: Target stream (defaults to the current sys.stderr)

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
    return handler
