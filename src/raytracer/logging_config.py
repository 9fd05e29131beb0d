"""
Logging Configuration
=====================
Installs handlers on the 'raytracer' package logger. Library modules only
call `logging.getLogger(__name__)`; this is the one place handlers are made.
"""
import logging
import sys
from typing import Optional, Union

from raytracer.config import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT

PACKAGE_LOGGER = "raytracer"

# Marks handlers installed here so a reconfiguration replaces only those
_HANDLER_TAG = "_raytracer_handler"


def resolve_level(level: Union[int, str]) -> int:
    """
    Convert a level name ("debug", "INFO", ...) or number to a logging level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: '{level}'")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Send the package's log records to stdout and, optionally, to a file.

    Calling it again replaces the handlers from the previous call, so records
    are never duplicated. Handlers added by other code are left alone.

    Args:
        level: Level for the logger and its handlers, as a number or a name.
        log_file: Optional path; the file is overwritten.

    Returns:
        The configured package logger.
    """
    level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
