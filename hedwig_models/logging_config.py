"""Logging setup shared by the generator modules and the CLI.

Every module asks for its logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once to route records through a rich handler on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hedwig_models"
DEFAULT_LOG_LEVEL = logging.WARNING


def setup_logging(
    level: int | str = DEFAULT_LOG_LEVEL, console: Console | None = None
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level as an int or a name such as ``"DEBUG"``.
        console: Rich console to log to. Defaults to a stderr console so
            generated code written to stdout stays clean.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), DEFAULT_LOG_LEVEL)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
