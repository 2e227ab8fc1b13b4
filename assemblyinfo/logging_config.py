"""Logging setup for assemblyinfo.

Modules obtain their logger with :func:`get_logger` and never configure
handlers themselves. The command line calls :func:`setup_logging` once.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "assemblyinfo"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``assemblyinfo`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Install a rich handler on the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level name or number.

    Returns:
        The package root logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger
