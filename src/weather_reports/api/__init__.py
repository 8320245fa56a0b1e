"""
HTTP layer for the sunrise/sunset source.
"""

from .client import HTTPClient
from .sun_pages import SunPageClient

__all__ = [
    "HTTPClient",
    "SunPageClient",
]
