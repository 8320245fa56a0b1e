"""
HTML parsing for the sunrise/sunset scraper.
"""

from .sun_parser import SunPageParser, parse_int

__all__ = [
    "SunPageParser",
    "parse_int",
]
