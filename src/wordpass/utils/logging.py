"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain namespaced loggers.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls never stack handlers.
    - Generated passwords and drawn words must never be passed to a logger.
"""

from __future__ import annotations

import logging
import sys

_ROOT = "wordpass"
_HANDLER_NAME = "wordpass-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for ``name``."""

    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.  Calling this again
    replaces the previous handler with one bound to the current
    ``sys.stderr``; the old stream is never flushed or written to, since it
    may already be closed.
    """

    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for stale in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["get_logger", "configure_logging"]
