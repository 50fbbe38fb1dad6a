"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

The root level comes from LOG_LEVEL. With SQL_TRACE on, the repositories
logger is lowered to DEBUG so generated statements are printed even when
the rest of the application logs at INFO.
"""

import logging
import sys

from config import LOG_LEVEL, SQL_TRACE

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_TRACE_LOGGER = "repositories"
_initialized = False


def _init_logging() -> None:
    """Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    level = getattr(logging, LOG_LEVEL, None)
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(handler)
    if SQL_TRACE:
        logging.getLogger(_TRACE_LOGGER).setLevel(logging.DEBUG)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _init_logging()
    return logging.getLogger(name)
