"""
Rain processing module.

Provides day classification, year/weekday grouping and report assembly.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..core import constants
from ..models import RainMeasurement, YearAggregate
from .classifier import DailyRainClassifier
from .grouper import YearWeekdayGrouper, parse_year_weekday, year_weekday_key
from .assembler import ReportAssembler, format_ratio


class RainProcessor:
    """
    Unified rain processor combining classification, grouping and assembly.

    This class provides a convenient interface to the week vs weekend
    computation.
    """

    def __init__(
        self,
        timezone: str = constants.DEFAULT_TIMEZONE,
        threshold_mm: float = constants.RAIN_THRESHOLD_MM,
        weekend_days: Sequence[int] = constants.WEEKEND_DAYS,
        daytime_start_hour: int = constants.DAYTIME_START_HOUR,
        daytime_end_hour: int = constants.DAYTIME_END_HOUR,
        language: str = constants.DEFAULT_LANGUAGE,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.threshold_mm = threshold_mm
        self.classifier = DailyRainClassifier(
            timezone=timezone,
            daytime_start_hour=daytime_start_hour,
            daytime_end_hour=daytime_end_hour,
            logger=self.logger
        )
        self.grouper = YearWeekdayGrouper(weekend_days=weekend_days, logger=self.logger)
        self.assembler = ReportAssembler(language=language, logger=self.logger)

    def aggregate(
        self,
        measurements: Iterable[RainMeasurement],
        daytime_only: bool
    ) -> Dict[int, YearAggregate]:
        """
        Classify measurements per day and aggregate them per year.

        Args:
            measurements: Raw measurements
            daytime_only: Restrict sums to the daytime window

        Returns:
            Mapping of year to finalized YearAggregate
        """
        days = self.classifier.classify(measurements, daytime_only, self.threshold_mm)
        return self.grouper.group(days)

    def build_report(self, measurements: Sequence[RainMeasurement]) -> List[List[str]]:
        """
        Run the whole-day and daytime aggregations and assemble the rows.

        Returns:
            Header row followed by one row per year
        """
        whole_day = self.aggregate(measurements, daytime_only=False)
        during_daytime = self.aggregate(measurements, daytime_only=True)
        return [self.assembler.header] + self.assembler.assemble(whole_day, during_daytime)


__all__ = [
    "DailyRainClassifier",
    "YearWeekdayGrouper",
    "ReportAssembler",
    "RainProcessor",
    "parse_year_weekday",
    "year_weekday_key",
    "format_ratio",
]
