"""Logging setup for the command-line tools."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def setup_logger(name: str, level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Configure a logger that writes to stderr through rich.

    Calling it again for the same name replaces the previous handler, so the
    level can be changed between invocations.

    Args:
        name: Logger name (usually the package name)
        level: Log level name or number

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module."""
    return logging.getLogger(name)
