"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_timer"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = os.path.abspath(log_dir / _LOG_FILE)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)

    # other handlers (pytest capture, host app) do not count as ours
    has_file_handler = any(
        isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename == log_path
        for h in logger.handlers
    )
    if not has_file_handler:
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
