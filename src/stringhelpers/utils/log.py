"""
Logging setup for stringhelpers.

The package logs through a single named logger that carries a
``NullHandler``, so nothing is emitted unless the host application
configures logging, either itself or through `configure_logging`.
"""

import logging
from typing import Union

from stringhelpers.defaults import LOG_FORMAT, LOGGER_NAME
from stringhelpers.utils.diagnostics import suggest_similar
from stringhelpers.utils.errors import InvalidArgument

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_LEVEL_NAMES = ["debug", "info", "warning", "error", "critical"]
_LEVEL_NUMBERS = [getattr(logging, name.upper()) for name in _LEVEL_NAMES]


def get_logger(name: str = "") -> logging.Logger:
    """Return the package logger, or a child of it for ``name``."""
    if not name:
        return logger
    return logger.getChild(name)


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Configure root logging and set the package log level.

    Args:
        level: A level name such as ``"debug"`` or one of the standard
            numeric levels (``logging.DEBUG`` ... ``logging.CRITICAL``)

    Returns:
        The package logger

    Raises:
        InvalidArgument: If ``level`` is not a standard level name or number
    """
    if isinstance(level, str):
        name = level.lower()
        if name not in _LEVEL_NAMES:
            logger.debug("rejecting unknown log level %r", level)
            raise InvalidArgument(
                "unknown log level",
                argument="level",
                value=level,
                suggestions=suggest_similar(name, _LEVEL_NAMES),
            )
        level = getattr(logging, name.upper())
    elif level not in _LEVEL_NUMBERS:
        logger.debug("rejecting unknown log level %r", level)
        raise InvalidArgument("unknown log level", argument="level", value=level)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
