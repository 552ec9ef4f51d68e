"""Logger setup for the renderer, raster export and API."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import CONFIG, AppConfig


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    config: AppConfig = CONFIG,
    log_file: Optional[str] = None,
    level: Optional[int] = None,
) -> logging.Logger:
    """Route ``fractree.*`` records to stdout, and to ``log_file`` when given.

    Level and format come from ``config``; ``level`` overrides the configured
    level. Calling it again replaces the handlers from the previous call, so
    the API can reload without duplicating output.
    """

    level = config.log_level if level is None else level
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(level)
    _drop_handlers(logger)

    formatter = logging.Formatter(config.log_format, datefmt=config.log_datefmt)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at %s", len(handlers), logging.getLevelName(level))
    return logger
