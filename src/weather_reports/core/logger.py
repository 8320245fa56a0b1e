"""
Logging for the weather report pipelines.

Console gets progress lines, the log file gets everything with source locations.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime

from .errors import WeatherReportError

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DEFAULT_LOG_FILE = "logs/weather_reports.log"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "weather_reports",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Configure the application logger.

    Calling it again replaces the handlers, so a scrape followed by an
    analyze in one process does not print every line twice.

    Args:
        name: Logger name
        log_file: Log file path, falls back to LOG_FILE then logs/weather_reports.log
        log_level: Level name applied to the logger itself

    Returns:
        Configured logger instance
    """
    log_path = Path(log_file or os.getenv("LOG_FILE", DEFAULT_LOG_FILE))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.addHandler(_handler(logging.StreamHandler(), logging.INFO, CONSOLE_FORMAT))
    logger.addHandler(_handler(
        logging.FileHandler(log_path, mode="a", encoding="utf-8"), logging.DEBUG, FILE_FORMAT
    ))
    # Root handlers (pytest, embedding apps) would print each line again
    logger.propagate = False

    return logger


class LoggerContext:
    """Context manager for logging one unit of work."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the operation being logged
        """
        self.logger = logger
        self.operation = operation
        self.start_time = None

    def __enter__(self):
        """Enter context and log start."""
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and log completion or error. Never suppresses."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            if isinstance(exc_val, WeatherReportError):
                # Typed errors carry their own context, no traceback needed
                self.logger.error(
                    f"Failed {self.operation} after {duration:.2f}s "
                    f"[{exc_val.kind}]: {exc_val}"
                )
            else:
                self.logger.error(
                    f"Failed {self.operation} after {duration:.2f}s: {exc_val}",
                    exc_info=True
                )
            return False

        self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return False
