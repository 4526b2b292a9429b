# === FILE: gitbook_crawler/logger.py ===
"""Logging for the crawler.

Messages go to stderr, because stdout carries the JSON page list in
discovery-only mode. ``--log-file`` adds a rotating file next to it.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOGGER_NAME: Final[str] = "gitbook_crawler"

#: rotation policy of --log-file
_MAX_LOG_BYTES: Final[int] = 2 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 2


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Point the crawler logger at stderr (and optionally *log_file*), dropping old handlers."""
    crawler_logger = logging.getLogger(LOGGER_NAME)
    crawler_logger.setLevel(level)
    for handler in list(crawler_logger.handlers):
        crawler_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        crawler_logger.addHandler(handler)

    crawler_logger.propagate = False
    return crawler_logger


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Positional-argument form of :func:`configure`, called by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
