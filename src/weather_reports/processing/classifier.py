"""
Daily rain classification.

Sums raw rain measurements per local calendar day and flags the days on
which it rained.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils
from ..models import DailyRainRecord, RainMeasurement


class DailyRainClassifier:
    """Classify local calendar days as rained or dry."""

    def __init__(
        self,
        timezone: str = constants.DEFAULT_TIMEZONE,
        daytime_start_hour: int = constants.DAYTIME_START_HOUR,
        daytime_end_hour: int = constants.DAYTIME_END_HOUR,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize classifier.

        Args:
            timezone: Local timezone used for calendar days and hours
            daytime_start_hour: First local hour counted in daytime mode (inclusive)
            daytime_end_hour: Local hour at which daytime ends (exclusive)
            logger: Logger instance
        """
        self.tz = DateUtils.parse_timezone(timezone)
        self.daytime_start_hour = daytime_start_hour
        self.daytime_end_hour = daytime_end_hour
        self.logger = logger or logging.getLogger(__name__)

    def is_daytime(self, local_time: datetime) -> bool:
        return self.daytime_start_hour <= local_time.hour < self.daytime_end_hour

    def classify(
        self,
        measurements: Iterable[Union[RainMeasurement, Any]],
        daytime_only: bool,
        threshold_mm: float
    ) -> List[DailyRainRecord]:
        """
        Sum measurements per local day and flag rained days.

        Outside the daytime window a measurement still creates its day but
        contributes zero to the sum.

        Args:
            measurements: RainMeasurement objects or (timestamp, value) pairs
            daytime_only: Only count measurements inside the daytime window
            threshold_mm: A day rained when its sum is strictly above this

        Returns:
            One record per distinct local date, ordered by date
        """
        sums: Dict[date, float] = {}
        zeroed = 0

        for measurement in measurements:
            if isinstance(measurement, RainMeasurement):
                timestamp, value = measurement.timestamp, measurement.value
            else:
                timestamp, value = measurement

            local_time = DateUtils.to_local(timestamp, self.tz)
            day = local_time.date()

            amount = value or 0.0
            if daytime_only and not self.is_daytime(local_time):
                if amount:
                    zeroed += 1
                amount = 0.0

            sums[day] = sums.get(day, 0.0) + amount

        records = [
            DailyRainRecord(day=day, total=total, rained=total > threshold_mm)
            for day, total in sorted(sums.items())
        ]

        mode = "daytime" if daytime_only else "whole day"
        self.logger.debug(
            f"Classified {len(records)} days ({mode}): "
            f"{sum(1 for r in records if r.rained)} rained, "
            f"{zeroed} night measurements ignored"
        )
        return records
