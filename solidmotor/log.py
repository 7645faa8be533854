"""Logging setup for solidmotor.

The library only attaches a ``NullHandler`` to the package logger; an
application that wants to see lifecycle messages calls
:func:`configure_logging` once.

Example:
    >>> from solidmotor.log import configure_logging
    >>> configure_logging("DEBUG")
"""

import logging
import sys

PACKAGE_LOGGER = "solidmotor"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module inside the package."""
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Args:
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        stream: Output stream, defaults to stdout

    Returns:
        The configured package logger

    Raises:
        ValueError: If the level name is not a logging level
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
