"""Logging setup shared by the whole package.

Modules obtain their logger through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich handler.
"""

import logging
from typing import Optional, Union

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "iconshape_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: Union[int, str] = logging.WARNING,
                  console=None) -> logging.Logger:
    """
    Configure package logging with a rich handler.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number
        console: Optional rich Console to log to

    Returns:
        The package root logger
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console,
            show_path=False,
            rich_tracebacks=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        _configured = True

    return logger


def reset_logging(logger_name: Optional[str] = None):
    """Remove handlers installed by :func:`setup_logging`."""
    global _configured

    logger = logging.getLogger(logger_name or ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    _configured = False
