# wut/utils/logging.py
"""
Logging configuration for wut.
"""
import sys
import logging
from pathlib import Path
from typing import Optional

from loguru import logger
from wut.constants import LOG_DIR, LOG_FORMAT, LOG_ROTATION, LOG_RETENTION
from wut.utils.enhanced_logging import EnhancedLogger

# Dictionary to store enhanced logger instances
_enhanced_loggers = {}


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Configure the application logging.

    Args:
        debug: Whether to enable debug logging.
        log_dir: Directory for the log files. Defaults to LOG_DIR.
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove default handlers
    logger.remove()

    log_level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        diagnose=debug,
    )

    log_file = log_dir / "wut.log"
    logger.add(
        log_file,
        format=LOG_FORMAT,
        level="INFO",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )

    # Structured JSON log file
    json_log_file = log_dir / "wut_structured.log"
    logger.add(
        json_log_file,
        serialize=True,
        level="INFO",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )

    # Route records from get_logger() loggers into the sinks above
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.DEBUG if debug else logging.INFO, force=True)

    logger.debug(f"Logging initialized. Log files: {log_file}, {json_log_file}")


def get_logger(name: str = "wut") -> EnhancedLogger:
    """
    Get a logger instance with the given name.

    Args:
        name: The name for the logger.

    Returns:
        An enhanced logger instance.
    """
    if name in _enhanced_loggers:
        return _enhanced_loggers[name]

    enhanced_logger = EnhancedLogger(name)
    _enhanced_loggers[name] = enhanced_logger

    return enhanced_logger
