"""
Main entry point for the weather report pipelines.

Runs the sunrise/sunset scraper or the week vs weekend rain report.
"""

import sys
from pathlib import Path
from typing import Optional

from .core import Config, setup_logger, LoggerContext, WeatherReportError
from .api import SunPageClient
from .parsing import SunPageParser
from .processing import RainProcessor
from .storage import RainStore
from .writer import CsvReportWriter
from .pipelines import RainReportPipeline, ScrapeSummary, SunriseSunsetScraper


class WeatherReportsApp:
    """Main application wiring configuration, logging and pipelines."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info("=" * 60)
        self.logger.info("Weather Reports")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.writer = CsvReportWriter(logger=self.logger)

    def scrape(
        self,
        from_year: Optional[int] = None,
        to_year: Optional[int] = None,
        continue_on_error: bool = False
    ) -> ScrapeSummary:
        """
        Scrape sunrise/sunset pages into one CSV file per year.

        Args:
            from_year: First year (defaults to configuration)
            to_year: Last year, inclusive (defaults to configuration)
            continue_on_error: Keep going after a failed year
        """
        from_year = from_year if from_year is not None else self.config.sun_from_year
        to_year = to_year if to_year is not None else self.config.sun_to_year
        if from_year > to_year:
            raise ValueError(f"from_year {from_year} is after to_year {to_year}")

        parser = SunPageParser(
            timezone=self.config.timezone,
            min_duration=self.config.min_duration_minutes,
            max_duration=self.config.max_duration_minutes,
            logger=self.logger
        )

        with SunPageClient(
            url_template=self.config.sun_url_template,
            timeout=self.config.http_timeout,
            max_retries=self.config.http_max_retries,
            logger=self.logger
        ) as client:
            scraper = SunriseSunsetScraper(
                client=client,
                parser=parser,
                writer=self.writer,
                output_dir=self.config.sun_output_dir,
                logger=self.logger
            )
            with LoggerContext(self.logger, f"scrape {from_year}-{to_year}"):
                return scraper.run(from_year, to_year, continue_on_error=continue_on_error)

    def analyze(self, threshold_mm: Optional[float] = None) -> Path:
        """
        Write the week vs weekend rain report.

        Args:
            threshold_mm: Rain threshold override (defaults to configuration)

        Returns:
            Path of the written report
        """
        if threshold_mm is None:
            threshold_mm = self.config.rain_threshold_mm

        processor = RainProcessor(
            timezone=self.config.timezone,
            threshold_mm=threshold_mm,
            weekend_days=self.config.weekend_days,
            daytime_start_hour=self.config.daytime_start_hour,
            daytime_end_hour=self.config.daytime_end_hour,
            language=self.config.report_language,
            logger=self.logger
        )

        with RainStore(self.config.database_path, logger=self.logger) as store:
            pipeline = RainReportPipeline(
                store=store,
                processor=processor,
                writer=self.writer,
                report_dir=self.config.report_dir,
                report_file=self.config.report_file,
                logger=self.logger
            )
            return pipeline.run()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Sunrise/sunset scraper and week vs weekend rain report"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape_parser = subparsers.add_parser("scrape", help="Scrape sunrise/sunset pages")
    scrape_parser.add_argument("--from-year", type=int, default=None, help="First year")
    scrape_parser.add_argument("--to-year", type=int, default=None, help="Last year (inclusive)")
    scrape_parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Skip a failing year instead of stopping"
    )

    analyze_parser = subparsers.add_parser("analyze", help="Write the week vs weekend rain report")
    analyze_parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Rain threshold in mm. Default: configuration"
    )

    args = parser.parse_args(argv)

    try:
        app = WeatherReportsApp(config_file=args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        if args.command == "scrape":
            summary = app.scrape(
                from_year=args.from_year,
                to_year=args.to_year,
                continue_on_error=args.continue_on_error
            )
            if summary.failed:
                sys.exit(1)
        else:
            app.analyze(threshold_mm=args.threshold)
    except (WeatherReportError, ValueError) as e:
        app.logger.error(f"Run aborted: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
