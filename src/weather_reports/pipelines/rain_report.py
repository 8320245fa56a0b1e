"""
Week vs weekend rain report pipeline.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..core import LoggerContext, constants
from ..processing import RainProcessor
from ..storage import RainStore
from ..writer import CsvReportWriter


class RainReportPipeline:
    """Compute the chance of rain per year for week and weekend days."""

    def __init__(
        self,
        store: RainStore,
        processor: RainProcessor,
        writer: CsvReportWriter,
        report_dir: str = constants.REPORT_DIR,
        report_file: str = constants.REPORT_FILE,
        logger: Optional[logging.Logger] = None
    ):
        self.store = store
        self.processor = processor
        self.writer = writer
        self.report_path = os.path.join(report_dir, report_file)
        self.logger = logger or logging.getLogger(__name__)

    def run(self) -> Path:
        """
        Build and write the report.

        Measurements are read once and both runs (whole day, daytime) are
        computed before anything is written.

        Returns:
            Path of the written report

        Raises:
            WeatherReportError: On any storage, parse, integrity or output failure
        """
        with LoggerContext(self.logger, "rain measurement fetch"):
            measurements = self.store.fetch_measurements()

        with LoggerContext(self.logger, "week vs weekend aggregation"):
            rows = self.processor.build_report(measurements)

        with LoggerContext(self.logger, "report write"):
            return self.writer.write_rain_report(self.report_path, rows)
