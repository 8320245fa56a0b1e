"""
Report row assembly.

Joins the whole-day and daytime aggregates per year and renders them as
flat CSV rows.
"""

import logging
import math
from typing import Dict, List, Optional

from ..core import constants
from ..core.errors import DataIntegrityError
from ..models import WeekVsWeekendReport, YearAggregate


def format_ratio(value: float) -> str:
    """Render a ratio with two decimals, NaN kept visible."""
    if math.isnan(value):
        return "NaN"
    return f"{value:.2f}"


class ReportAssembler:
    """Build the week vs weekend report rows."""

    def __init__(
        self,
        language: str = constants.DEFAULT_LANGUAGE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize assembler.

        Args:
            language: Key into REPORT_LOCALES for header and yes/no tokens
            logger: Logger instance
        """
        if language not in constants.REPORT_LOCALES:
            raise ValueError(f"Unknown report language: {language}")
        self.locale = constants.REPORT_LOCALES[language]
        self.logger = logger or logging.getLogger(__name__)

    @property
    def header(self) -> List[str]:
        return list(self.locale["header"])

    def join(
        self,
        whole_day: Dict[int, YearAggregate],
        during_daytime: Dict[int, YearAggregate]
    ) -> List[WeekVsWeekendReport]:
        """
        Join both runs per year, sorted ascending by year.

        Raises:
            DataIntegrityError: If the two mappings do not hold the same years
        """
        only_whole_day = sorted(set(whole_day) - set(during_daytime))
        only_daytime = sorted(set(during_daytime) - set(whole_day))
        if only_whole_day or only_daytime:
            raise DataIntegrityError(
                "Whole-day and daytime aggregates cover different years",
                {"missing_in_daytime": only_whole_day, "missing_in_whole_day": only_daytime}
            )

        return [
            WeekVsWeekendReport(
                year=year,
                whole_day=whole_day[year],
                during_daytime=during_daytime[year],
            )
            for year in sorted(whole_day)
        ]

    def _token(self, flag: bool) -> str:
        return self.locale["yes"] if flag else self.locale["no"]

    def _aggregate_fields(self, agg: YearAggregate) -> List[str]:
        return [
            format_ratio(agg.chance_of_rain),
            format_ratio(agg.chance_of_rain_week),
            format_ratio(agg.chance_of_rain_weekend),
            self._token(agg.weekend_more_wet),
        ]

    def to_row(self, report: WeekVsWeekendReport) -> List[str]:
        """Render one report as a flat CSV row."""
        return (
            [str(report.year)]
            + self._aggregate_fields(report.whole_day)
            + self._aggregate_fields(report.during_daytime)
        )

    def assemble(
        self,
        whole_day: Dict[int, YearAggregate],
        during_daytime: Dict[int, YearAggregate]
    ) -> List[List[str]]:
        """
        Build the data rows of the report (header not included).

        Args:
            whole_day: Aggregates over all measurements
            during_daytime: Aggregates over daytime measurements only

        Returns:
            One rendered row per year, ascending
        """
        reports = self.join(whole_day, during_daytime)
        self.logger.info(f"Assembled report rows for {len(reports)} years")
        return [self.to_row(report) for report in reports]
