"""
Logging setup shared by the search, graph and CSP modules.

All loggers are children of ``playground`` so a single handler on the parent
covers every module. The level is read from PLAYGROUND_LOG_LEVEL.
"""

from __future__ import annotations

from typing import Optional
import logging
import os

LOGGER_NAME = "playground"
LOG_LEVEL_ENV = "PLAYGROUND_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(LOGGER_NAME)

    # Only install a handler once, even if many modules ask for loggers.
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s"))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL).upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the shared ``playground`` logger, or a named child of it.

    ``get_logger("search")`` yields ``playground.search``.
    """
    root = _configure_root()
    if not name:
        return root
    return root.getChild(name)
