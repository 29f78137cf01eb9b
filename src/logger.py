import logging
import os
import sys
from typing import Optional, Set, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_names: Set[str] = set()


def _default_level() -> int:
    if os.environ.get("DEBUG_LOGS_ENABLED", "false").lower() == "true":
        return logging.DEBUG
    return logging.INFO


def get_logger(name: str = "url-builder", level: Optional[Union[int, str]] = None):
    """
    Configures and returns a logger writing to stderr.

    The level is `level` when given, otherwise DEBUG if the
    DEBUG_LOGS_ENABLED environment variable is "true" and INFO if not.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _default_level())

    # Configure handler only if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _logger_names.add(name)
    return logger


def set_level(level: Union[int, str]) -> None:
    """Change the level of every logger handed out by `get_logger`."""
    for name in _logger_names:
        logging.getLogger(name).setLevel(level)


# Short alias used by modules as `logger = Logger(__name__)`
Logger = get_logger
