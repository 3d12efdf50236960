# utils/logging_utils.py

"""
Lightweight logging utilities for the xoroshiro-streams project.

This helper gives you:

    - a single place to configure log format / level,
    - automatic creation of a log directory when logging to a file,
    - a simple `get_logger(__name__)` function.

Usage:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("CoreGenerator jumped")

The generators only log at DEBUG and never on the per-draw path, so the
default INFO level keeps them quiet.
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Multiple calls with the same name return the same logger instance.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = "xoroshiro_streams.log",
) -> None:
    """
    Configure the root logger for the entire project.

    Call this once near the start of main.py. If you never call it,
    `get_logger` will still work with a minimal default configuration.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to LOGS_DIR / filename.
        log_to_stdout:
            If True, also log to the console.
        filename:
            Name of the log file inside LOGS_DIR.
    """
    handlers: list[logging.Handler] = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_to_file:
        _ensure_log_dir(LOGS_DIR)
        fh = logging.FileHandler(LOGS_DIR / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by get_logger); just adjust the level
        root.setLevel(level)
        return

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(
    name: Optional[str] = None,
    level: Optional[int] = None,
) -> Logger:
    """
    Get a logger with a given name.

    The first time this is called, if no handlers exist on the root
    logger, we set up a minimal console configuration so logs are
    visible.

    Args:
        name:
            Logger name (usually __name__ in the caller). Defaults to
            "__main__".
        level:
            Optional level for this logger. If None the logger inherits
            the root level, so configure_root_logger controls it.

    Returns:
        logging.Logger instance.
    """
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
        )

    _LOGGER_CACHE[name] = logger
    return logger
