"""
Logging for the ``reading_list_api`` package.

Every module logs through ``logging.getLogger(__name__)``, so all
records pass through the package logger configured here.  Handlers
are attached to that logger only; the root logger belongs to whoever
hosts the app (uvicorn, pytest) and is left untouched.  Records still
propagate upwards.
"""

import logging
from typing import List

from .config import Settings

PACKAGE_LOGGER = "reading_list_api"
HANDLER_PREFIX = PACKAGE_LOGGER + "."


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(settings: Settings) -> logging.Logger:
    """Point the package logger at the console and, optionally, a file.

    Level, format and log file come from ``settings``.  Calling this
    again (each ``create_app`` does) swaps the previously installed
    handlers for new ones, so the last settings win and records are
    never written twice.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(_level(settings.log_level))
    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    handlers[0].set_name(HANDLER_PREFIX + "console")
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
