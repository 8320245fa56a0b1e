"""
Core utilities for the weather report pipelines.

Provides configuration management, logging, errors and date handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .errors import (
    WeatherReportError,
    TransportError,
    ParseError,
    DataIntegrityError,
    OutputError,
    StorageError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "WeatherReportError",
    "TransportError",
    "ParseError",
    "DataIntegrityError",
    "OutputError",
    "StorageError",
]
