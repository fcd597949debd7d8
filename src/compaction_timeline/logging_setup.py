"""Logging setup for the compaction timeline tools."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "COMPACTION_TIMELINE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level_name: Optional[str]) -> int:
    name = (level_name or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def init_logging(
    level_name: Optional[str] = None,
    log_path: Optional[Path] = None,
    app_name: str = "compaction_timeline",
) -> int:
    """Initialize root logging and return the effective level."""
    level = _resolve_level(level_name)

    logger = logging.getLogger()
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    ):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path is not None and not any(
        isinstance(h, RotatingFileHandler) for h in logger.handlers
    ):
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=2_000_000,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError:
            logging.getLogger(app_name).warning(
                "Cannot open log file %s; logging to stderr only",
                log_path,
                exc_info=True,
            )
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logging.getLogger(app_name).debug(
        "Logging initialized at %s", logging.getLevelName(level)
    )
    return level


def set_console_level(level: int) -> None:
    """Adjust console (stderr) handler level."""
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setLevel(level)
