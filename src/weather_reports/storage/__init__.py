"""
Rain measurement storage.
"""

from .rain_store import RainStore, parse_timestamp

__all__ = [
    "RainStore",
    "parse_timestamp",
]
