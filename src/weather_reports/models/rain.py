"""
Rain analysis data models.

Contains DTOs for measurements, classified days, grouped buckets and the
per-year week vs weekend aggregates.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.errors import DataIntegrityError


def _ratio(part: int, total: int) -> float:
    """Divide, yielding NaN when there is nothing to divide by."""
    if total == 0:
        return math.nan
    return part / total


@dataclass
class RainMeasurement:
    """One raw timestamped rain measurement."""

    timestamp: datetime
    value: Optional[float]  # mm


@dataclass
class DailyRainRecord:
    """Rain sum for one local calendar day."""

    day: date
    total: float  # mm
    rained: bool


@dataclass(frozen=True)
class BucketCount:
    """Number of days sharing a year-weekday key and a rained flag."""

    year_weekday: str  # "<year>-<weekday>", Sunday=0
    rained: bool
    number_of_days: int


@dataclass(frozen=True)
class YearWeekdayBucket:
    """Key of the week vs weekend grouping."""

    year: int
    is_weekend: bool


@dataclass
class YearAggregate:
    """
    Week and weekend rain counts for one year.

    Counts are accumulated first with add(). Ratios only exist after
    finalize() has been called once all buckets of the year are merged.
    """

    year: int
    wet_days_week: int = 0
    total_days_week: int = 0
    wet_days_weekend: int = 0
    total_days_weekend: int = 0
    _chance_of_rain: Optional[float] = field(default=None, repr=False)
    _chance_of_rain_week: Optional[float] = field(default=None, repr=False)
    _chance_of_rain_weekend: Optional[float] = field(default=None, repr=False)

    @property
    def total_days(self) -> int:
        return self.total_days_week + self.total_days_weekend

    @property
    def total_wet_days(self) -> int:
        return self.wet_days_week + self.wet_days_weekend

    @property
    def is_finalized(self) -> bool:
        return self._chance_of_rain is not None

    def add(self, is_weekend: bool, rained: bool, number_of_days: int) -> None:
        """
        Add a bucket of days to the raw counts.

        Raises:
            DataIntegrityError: If the aggregate was already finalized
        """
        if self.is_finalized:
            raise DataIntegrityError(
                "Cannot add days to a finalized year aggregate",
                {"year": self.year}
            )

        if is_weekend:
            self.total_days_weekend += number_of_days
            if rained:
                self.wet_days_weekend += number_of_days
        else:
            self.total_days_week += number_of_days
            if rained:
                self.wet_days_week += number_of_days

    def finalize(self) -> "YearAggregate":
        """Compute all ratios from the final counts."""
        self._chance_of_rain = _ratio(self.total_wet_days, self.total_days)
        self._chance_of_rain_week = _ratio(self.wet_days_week, self.total_days_week)
        self._chance_of_rain_weekend = _ratio(self.wet_days_weekend, self.total_days_weekend)
        return self

    def _require(self, value: Optional[float], name: str) -> float:
        if value is None:
            raise DataIntegrityError(
                f"{name} read before the year aggregate was finalized",
                {"year": self.year}
            )
        return value

    @property
    def chance_of_rain(self) -> float:
        return self._require(self._chance_of_rain, "chance_of_rain")

    @property
    def chance_of_rain_week(self) -> float:
        return self._require(self._chance_of_rain_week, "chance_of_rain_week")

    @property
    def chance_of_rain_weekend(self) -> float:
        return self._require(self._chance_of_rain_weekend, "chance_of_rain_weekend")

    @property
    def weekend_more_wet(self) -> bool:
        # NaN on either side compares False
        return self.chance_of_rain_weekend > self.chance_of_rain_week


@dataclass
class WeekVsWeekendReport:
    """Whole-day and daytime aggregates of one year, joined."""

    year: int
    whole_day: YearAggregate
    during_daytime: YearAggregate
