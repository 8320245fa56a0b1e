"""
Sunrise/sunset scraping pipeline.

Fetches, parses and writes one CSV file per year, strictly in order.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..api import SunPageClient
from ..core import LoggerContext, constants
from ..core.errors import WeatherReportError
from ..parsing import SunPageParser
from ..writer import CsvReportWriter


@dataclass
class YearOutcome:
    """Result of scraping one year."""

    year: int
    path: Optional[str] = None
    rows: int = 0
    error: Optional[WeatherReportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScrapeSummary:
    """Outcomes of one scraper run."""

    outcomes: List[YearOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> List[YearOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[YearOutcome]:
        return [o for o in self.outcomes if not o.ok]


class SunriseSunsetScraper:
    """Scrape the yearly sunrise/sunset tables into CSV files."""

    def __init__(
        self,
        client: SunPageClient,
        parser: SunPageParser,
        writer: CsvReportWriter,
        output_dir: str = constants.SUN_OUTPUT_DIR,
        logger: Optional[logging.Logger] = None
    ):
        self.client = client
        self.parser = parser
        self.writer = writer
        self.output_dir = output_dir
        self.logger = logger or logging.getLogger(__name__)

    def path_for_year(self, year: int) -> str:
        return os.path.join(self.output_dir, constants.SUN_FILE_TEMPLATE.format(year=year))

    def scrape_year(self, year: int) -> YearOutcome:
        """
        Fetch, parse and write one year.

        Raises:
            TransportError: If the page cannot be fetched
            ParseError: If the page holds an invalid data row
            OutputError: If the CSV file cannot be written
        """
        with LoggerContext(self.logger, f"year {year}"):
            html = self.client.fetch_year(year)
            rows = self.parser.parse(html)
            path = self.path_for_year(year)
            self.writer.write_sun_rows(path, rows)
        return YearOutcome(year=year, path=path, rows=len(rows))

    def run(
        self,
        from_year: int,
        to_year: int,
        continue_on_error: bool = False
    ) -> ScrapeSummary:
        """
        Scrape every year from from_year to to_year inclusive.

        Args:
            from_year: First year
            to_year: Last year
            continue_on_error: Record a failing year and move on instead of
                               stopping the run

        Returns:
            Summary with one outcome per attempted year

        Raises:
            WeatherReportError: The first failure, unless continue_on_error
        """
        summary = ScrapeSummary()

        for year in range(from_year, to_year + 1):
            self.logger.info(f"Processing year {year} ...")
            try:
                summary.outcomes.append(self.scrape_year(year))
            except WeatherReportError as e:
                if not continue_on_error:
                    raise
                summary.outcomes.append(YearOutcome(year=year, error=e))

        self.logger.info(
            f"Scrape complete: {len(summary.succeeded)}/{len(summary.outcomes)} years written"
        )
        for outcome in summary.failed:
            self.logger.warning(f"  - {outcome.year}: [{outcome.error.kind}] {outcome.error}")

        return summary
