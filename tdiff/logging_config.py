"""Centralized logging configuration for tdiff."""

import logging
import sys
from pathlib import Path

from .api.config.get_home_dir import get_home_dir


def setup_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure logging for tdiff.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to log file (default ~/.tdiff/tdiff.log)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if log_file is None:
        log_file = get_home_dir("tdiff.log")

    # Ensure log directory exists
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("tdiff")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string)
    for handler in (logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler(sys.stderr)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"tdiff.{name}")
