"""
Year/weekday grouping of classified rain days.

Groups days into (year, weekend-or-not) buckets and merges the buckets of
each year into a YearAggregate. Counting and ratio computation are separate
phases so a ratio is never computed from a partially merged year.
"""

import logging
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.errors import DataIntegrityError
from ..models import BucketCount, DailyRainRecord, YearAggregate, YearWeekdayBucket


def year_weekday_key(record: DailyRainRecord) -> str:
    """Build the '<year>-<weekday>' key of a day, Sunday=0."""
    return f"{record.day.year}-{DateUtils.sunday_based_weekday(record.day)}"


# Plain ASCII digits only; int() alone would accept signs, spaces and underscores
DIGITS = re.compile(r"[0-9]+")


def parse_year_weekday(key: str) -> Tuple[int, int]:
    """
    Split a '<year>-<weekday>' key.

    Raises:
        DataIntegrityError: If the key is not exactly a year and a weekday 0-6
    """
    parts = key.split("-") if isinstance(key, str) else []
    if len(parts) != 2:
        raise DataIntegrityError("Format year-weekday expected", {"year_weekday": key})

    if not DIGITS.fullmatch(parts[0]):
        raise DataIntegrityError("Failed to parse year", {"year_weekday": key, "year": parts[0]})

    if not DIGITS.fullmatch(parts[1]):
        raise DataIntegrityError(
            "Failed to parse weekday", {"year_weekday": key, "weekday": parts[1]}
        )

    year, weekday = int(parts[0]), int(parts[1])
    if not 0 <= weekday <= 6:
        raise DataIntegrityError(
            "Weekday outside 0-6", {"year_weekday": key, "weekday": weekday}
        )

    return year, weekday


class YearWeekdayGrouper:
    """Group classified days per year into week and weekend counts."""

    def __init__(
        self,
        weekend_days: Sequence[int] = constants.WEEKEND_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize grouper.

        Args:
            weekend_days: Weekday numbers forming the weekend (Sunday=0 .. Saturday=6)
            logger: Logger instance
        """
        self.weekend_days = frozenset(weekend_days)
        self.logger = logger or logging.getLogger(__name__)

    def count_buckets(self, records: Iterable[DailyRainRecord]) -> List[BucketCount]:
        """
        Count days per year-weekday key and rained flag.

        Args:
            records: Classified days

        Returns:
            One BucketCount per (key, rained) combination, sorted by key
        """
        counts = Counter((year_weekday_key(r), r.rained) for r in records)
        return [
            BucketCount(year_weekday=key, rained=rained, number_of_days=n)
            for (key, rained), n in sorted(counts.items())
        ]

    def bucket_totals(
        self,
        bucket_counts: Iterable[BucketCount]
    ) -> Dict[YearWeekdayBucket, Tuple[int, int]]:
        """
        Accumulate wet and total days per (year, is_weekend) bucket.

        Raises:
            DataIntegrityError: On a malformed year-weekday key
        """
        totals: Dict[YearWeekdayBucket, Tuple[int, int]] = {}

        for row in bucket_counts:
            year, weekday = parse_year_weekday(row.year_weekday)
            bucket = YearWeekdayBucket(year=year, is_weekend=weekday in self.weekend_days)

            wet, total = totals.get(bucket, (0, 0))
            if row.rained:
                wet += row.number_of_days
            totals[bucket] = (wet, total + row.number_of_days)

        return totals

    def merge(self, bucket_counts: Iterable[BucketCount]) -> Dict[int, YearAggregate]:
        """
        Merge bucket counts into finalized per-year aggregates.

        All rows are accumulated before any ratio is computed, so the
        arrival order of the rows has no influence on the result.

        Args:
            bucket_counts: Grouped rows, in any order

        Returns:
            Mapping of year to finalized YearAggregate

        Raises:
            DataIntegrityError: On a malformed year-weekday key
        """
        aggregates: Dict[int, YearAggregate] = {}

        for bucket, (wet, total) in self.bucket_totals(bucket_counts).items():
            agg = aggregates.setdefault(bucket.year, YearAggregate(year=bucket.year))
            agg.add(bucket.is_weekend, rained=True, number_of_days=wet)
            agg.add(bucket.is_weekend, rained=False, number_of_days=total - wet)

        for year, agg in aggregates.items():
            agg.finalize()
            if agg.total_days < constants.FULL_YEAR_DAYS:
                self.logger.warning(
                    f"Year {year} only covers {agg.total_days} days, "
                    "its chances of rain are based on a partial year"
                )

        return aggregates

    def group(self, records: Iterable[DailyRainRecord]) -> Dict[int, YearAggregate]:
        """Count and merge classified days in one step."""
        return self.merge(self.count_buckets(records))
