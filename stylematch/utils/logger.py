"""Structured logging configuration for StyleMatch.

This module provides colored console logging and rotating file logging
with performance tracking utilities.
"""

import logging
import os
import time
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog


CONSOLE_FORMAT_COLOR = "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "stylematch.log"


def _setup_console_handler(level: int) -> logging.Handler:
    """Create a colored console handler.

    Args:
        level: Logging level

    Returns:
        Configured console handler
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    formatter = colorlog.ColoredFormatter(
        CONSOLE_FORMAT_COLOR,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    )
    console_handler.setFormatter(formatter)
    return console_handler


def _resolve_log_dir(log_dir: Optional[Path]) -> Path:
    if log_dir is not None:
        return Path(log_dir)
    env_dir = os.environ.get('STYLEMATCH_LOG_DIR')
    if env_dir:
        return Path(env_dir)
    project_root = Path(__file__).parent.parent.parent
    return project_root / "logs"


def _setup_file_handler(level: int, log_dir: Optional[Path] = None) -> logging.Handler:
    """Create and configure rotating file handler.

    Args:
        level: Logging level
        log_dir: Directory for log files (default: $STYLEMATCH_LOG_DIR or logs/)

    Returns:
        Configured rotating file handler
    """
    log_dir = _resolve_log_dir(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Rotating file handler: max 10MB, keep 5 backup files
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return file_handler


def get_logger(name: str, log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Get or create a logger with console and file handlers.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_dir: Directory for log files
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
              If None, uses LOG_LEVEL environment variable, defaulting to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if not logger.handlers:
        if level is not None:
            log_level_str = level.upper()
        else:
            log_level_str = os.environ.get('LOG_LEVEL', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)

        logger.setLevel(log_level)
        logger.addHandler(_setup_console_handler(log_level))
        logger.addHandler(_setup_file_handler(log_level, log_dir))
        logger.propagate = False

    return logger


@contextmanager
def log_execution_time(logger: logging.Logger, operation: str):
    """Context manager to automatically log operation execution time.

    Usage:
        with log_execution_time(logger, "catalog load"):
            products = load_catalog(path)
    """
    logger.debug(f"Starting: {operation}")
    start_time = time.time()

    try:
        yield
    finally:
        duration = time.time() - start_time
        logger.debug(f"Completed: {operation} in {duration:.3f}s")


def set_log_level(logger: logging.Logger, level: str) -> None:
    """Change the log level of a logger and all its handlers.

    Args:
        logger: Logger instance
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level_upper = level.upper()
    log_level = getattr(logging, level_upper, logging.INFO)

    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)

    logger.debug(f"Log level changed to {level_upper}")


def set_package_log_level(level: str, package: str = "stylematch") -> None:
    """Apply a log level to every logger already created under ``package``."""
    for name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(candidate, logging.Logger):
            continue
        if name == package or name.startswith(f"{package}."):
            set_log_level(candidate, level)
