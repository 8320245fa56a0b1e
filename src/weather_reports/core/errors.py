"""
Error types for the weather report pipelines.

Every failure is terminal for its unit of work (one scraped year or one
report). The pipeline raises one of these and the caller decides whether to
continue with the next unit or stop.
"""

from typing import Any, Dict, Optional


class WeatherReportError(Exception):
    """Base class for pipeline failures."""

    kind = "error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Human readable description
            context: Structured data needed to diagnose the failure
                     (source string, url, path, ...)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class TransportError(WeatherReportError):
    """Non-2xx response or network failure."""

    kind = "transport"


class ParseError(WeatherReportError):
    """Unexpected HTML shape or unparseable value."""

    kind = "parse"


class DataIntegrityError(WeatherReportError):
    """Input that would silently corrupt derived ratios."""

    kind = "data_integrity"


class OutputError(WeatherReportError):
    """Output file could not be created or written."""

    kind = "output"


class StorageError(WeatherReportError):
    """Rain measurement store could not be read or written."""

    kind = "storage"
