"""
Data models for the weather report pipelines.

Contains DTOs for sunrise/sunset rows and rain aggregates.
"""

from .sun import SunRow
from .rain import (
    RainMeasurement,
    DailyRainRecord,
    BucketCount,
    YearWeekdayBucket,
    YearAggregate,
    WeekVsWeekendReport,
)

__all__ = [
    "SunRow",
    "RainMeasurement",
    "DailyRainRecord",
    "BucketCount",
    "YearWeekdayBucket",
    "YearAggregate",
    "WeekVsWeekendReport",
]
