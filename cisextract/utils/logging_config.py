"""
Logging Setup (loguru)

One console sink for progress messages plus, when LOG_TO_FILE is on, two
rotating files in LOGS_DIR: a full extraction log and an errors-only log.
"""

import sys
from datetime import datetime
from typing import Any, Optional

from loguru import logger as _logger

from cisextract.config import (
    LOG_LEVEL,
    LOG_TO_FILE,
    LOGS_DIR,
)


# Files carry date and call site; the console only shows the wall clock
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"

# (file prefix, minimum level or None for the configured level, rotation, retention)
FILE_SINKS = [
    ("extract", None, "10 MB", 10),
    ("errors", "ERROR", "5 MB", 20),
]


def _add_file_sinks(level: str) -> None:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    for prefix, sink_level, rotation, retention in FILE_SINKS:
        path = LOGS_DIR / f"{prefix}_{stamp}.log"
        _logger.add(
            path,
            format=FILE_FORMAT,
            level=sink_level or level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )
        _logger.debug(f"Log file: {path}")


def setup_logger(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> Any:
    """
    Reset loguru and install the extractor's sinks.

    Args:
        level: Minimum level for console and main log file (default LOG_LEVEL)
        log_to_file: Add the rotating file sinks (default LOG_TO_FILE)

    Returns:
        The configured loguru logger

    Example:
        >>> logger = setup_logger(log_to_file=False)
        >>> logger.info("Converting benchmark")
    """
    level = level or LOG_LEVEL
    if log_to_file is None:
        log_to_file = LOG_TO_FILE

    _logger.remove()
    _logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_to_file:
        _add_file_sinks(level)

    return _logger


def get_logger(name: str) -> Any:
    """Logger with `name` bound into the record's extra context."""
    return _logger.bind(name=name)


def log_step_start(step_name: str) -> None:
    """Log the banner opening a pipeline step."""
    _logger.info("=" * 80)
    _logger.info(step_name.upper())
    _logger.info("=" * 80)


def log_step_complete(step_name: str, duration: float) -> None:
    """Log the end of a pipeline step and how long it took."""
    _logger.success(f"COMPLETED: {step_name} ({duration:.2f}s)")
    _logger.info("=" * 80)


logger = _logger


__all__ = [
    "setup_logger",
    "get_logger",
    "log_step_start",
    "log_step_complete",
    "logger",
]
