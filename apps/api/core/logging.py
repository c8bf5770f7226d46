"""
Logging helpers for the BizTime API.

Every module asks for its logger through get_logger(__name__) so that the
format and level are configured in one place.
"""

import logging
from typing import Optional

from apps.api.core.config import settings


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a logger with a single stream handler attached.

    Args:
        name: Module name (typically __name__)
        level: Optional level name; defaults to settings.LOG_LEVEL
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # Avoid duplicate handlers when a module is imported twice
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    # Our handler already prints the record; don't repeat it via the root logger
    logger.propagate = False

    return logger
