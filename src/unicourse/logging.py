"""Centralized logging configuration for UniCourse.

Diagnostics go to stderr and, optionally, to a rotating log file. Stdout is
reserved for the interpreter's protocol messages.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_FILE = "unicourse.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "WARNING"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up the unicourse logger.

    Args:
        log_dir: Directory for log files. No file is written when this is None
                 and UNICOURSE_LOG_DIR is not set.
        log_file: Log file name. Defaults to 'unicourse.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
               UNICOURSE_LOG_LEVEL, then WARNING.
        console: Whether to also log to stderr. Defaults to True.

    Returns:
        The root unicourse logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("UNICOURSE_LOG_DIR")

    if level is None:
        level = os.environ.get("UNICOURSE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)

    logger = logging.getLogger("unicourse")
    logger.setLevel(log_level)
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.info("UniCourse logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'registry', 'interpreter').
              Will be prefixed with 'unicourse.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("unicourse."):
        name = f"unicourse.{name}"
    return logging.getLogger(name)
