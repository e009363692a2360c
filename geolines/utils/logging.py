"""Package logger for geolines"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set


def _build_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


LOGGER = _build_logger('geolines')

# Messages already emitted by warn_once
_EMITTED: Set[str] = set()


def warn_once(message: str):
    """
    Emit a warning through the package logger, once per distinct message.

    Args:
        message:
            The warning text
    """
    if message in _EMITTED:
        return

    _EMITTED.add(message)
    LOGGER.warning(message)
