"""
Batch pipelines: sunrise/sunset scraping and the rain report.
"""

from .scraper import SunriseSunsetScraper, ScrapeSummary, YearOutcome
from .rain_report import RainReportPipeline

__all__ = [
    "SunriseSunsetScraper",
    "ScrapeSummary",
    "YearOutcome",
    "RainReportPipeline",
]
