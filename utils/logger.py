"""
utils/logger.py
---------------
Logging setup shared by the db and repositories layers.
Call `get_logger(__name__)` at module level; the root logger is
configured on first use at the level named by LOG_LEVEL.
"""

import logging
import sys

from config import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def _configure_root() -> None:
    """Attach a single stdout handler to the root logger."""
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    root = logging.getLogger()
    root.addHandler(_handler)
    level = getattr(logging, LOG_LEVEL, None)
    root.setLevel(level if isinstance(level, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called `name`, configuring logging if needed."""
    _configure_root()
    return logging.getLogger(name)
