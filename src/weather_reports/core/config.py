"""
Configuration module for the weather report pipelines.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, List, Optional
from pathlib import Path

import pytz

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _set(self, section: str, key: str, value: Any) -> None:
        self.config.setdefault(section, {})[key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("TIMEZONE"):
            self._set("processing", "timezone", os.getenv("TIMEZONE"))

        if os.getenv("RAIN_THRESHOLD_MM"):
            try:
                threshold = float(os.getenv("RAIN_THRESHOLD_MM"))
            except ValueError:
                raise ValueError(
                    f"RAIN_THRESHOLD_MM must be a number, got {os.getenv('RAIN_THRESHOLD_MM')!r}"
                )
            self._set("analysis", "rain_threshold_mm", threshold)

        if os.getenv("DATABASE_PATH"):
            self._set("analysis", "database_path", os.getenv("DATABASE_PATH"))

        if os.getenv("REPORT_DIR"):
            self._set("analysis", "report_dir", os.getenv("REPORT_DIR"))

        if os.getenv("SUN_OUTPUT_DIR"):
            self._set("scraper", "output_dir", os.getenv("SUN_OUTPUT_DIR"))

        if os.getenv("LOG_LEVEL"):
            self._set("logging", "level", os.getenv("LOG_LEVEL"))

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and sane."""
        required_config = {
            "processing": ["timezone"],
            "scraper": [],
            "analysis": [],
        }

        missing_sections = [s for s in required_config if s not in self.config]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Invalid timezone: {self.timezone}")

        if self.sun_from_year > self.sun_to_year:
            raise ValueError(
                f"scraper.from_year ({self.sun_from_year}) is after "
                f"scraper.to_year ({self.sun_to_year})"
            )

        if self.min_duration_minutes > self.max_duration_minutes:
            raise ValueError("scraper.min_duration_minutes exceeds max_duration_minutes")

        invalid_days = [d for d in self.weekend_days if not 0 <= d <= 6]
        if invalid_days or not self.weekend_days:
            raise ValueError(
                f"analysis.weekend_days must be weekday numbers 0-6 (Sunday=0), "
                f"got {self.weekend_days}"
            )

        start, end = self.daytime_start_hour, self.daytime_end_hour
        if not (0 <= start < end <= 24):
            raise ValueError(
                f"Invalid daytime window {start}-{end}: expected 0 <= start < end <= 24"
            )

        if self.report_language not in constants.REPORT_LOCALES:
            raise ValueError(
                f"Unknown report language {self.report_language!r}. "
                f"Available: {', '.join(constants.REPORT_LOCALES)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'analysis.rain_threshold_mm')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def timezone(self) -> str:
        """Get local timezone identifier."""
        return self.get("processing.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def sun_url_template(self) -> str:
        """Get sunrise/sunset page URL template (with a {year} field)."""
        return self.get("scraper.url_template", constants.SUN_URL_TEMPLATE)

    @property
    def sun_from_year(self) -> int:
        """Get first year to scrape."""
        return int(self.get("scraper.from_year", constants.SUN_FROM_YEAR))

    @property
    def sun_to_year(self) -> int:
        """Get last year to scrape (inclusive)."""
        return int(self.get("scraper.to_year", constants.SUN_TO_YEAR))

    @property
    def sun_output_dir(self) -> str:
        """Get output directory for sunrise/sunset CSV files."""
        return self.get("scraper.output_dir", constants.SUN_OUTPUT_DIR)

    @property
    def http_timeout(self) -> int:
        """Get HTTP timeout in seconds."""
        return self.get("scraper.timeout", constants.HTTP_TIMEOUT)

    @property
    def http_max_retries(self) -> int:
        """Get HTTP retry attempts."""
        return self.get("scraper.max_retries", constants.HTTP_MAX_RETRIES)

    @property
    def min_duration_minutes(self) -> int:
        return self.get("scraper.min_duration_minutes", constants.MIN_DURATION_MINUTES)

    @property
    def max_duration_minutes(self) -> int:
        return self.get("scraper.max_duration_minutes", constants.MAX_DURATION_MINUTES)

    @property
    def database_path(self) -> str:
        """Get path of the SQLite rain store."""
        return self.get("analysis.database_path", constants.DATABASE_PATH)

    @property
    def rain_threshold_mm(self) -> float:
        """Get rain threshold in millimeters."""
        return float(self.get("analysis.rain_threshold_mm", constants.RAIN_THRESHOLD_MM))

    @property
    def daytime_start_hour(self) -> int:
        return self.get("analysis.daytime_start_hour", constants.DAYTIME_START_HOUR)

    @property
    def daytime_end_hour(self) -> int:
        return self.get("analysis.daytime_end_hour", constants.DAYTIME_END_HOUR)

    @property
    def weekend_days(self) -> List[int]:
        """Get weekend weekday numbers (Sunday=0 .. Saturday=6)."""
        return list(self.get("analysis.weekend_days", constants.WEEKEND_DAYS))

    @property
    def report_dir(self) -> str:
        return self.get("analysis.report_dir", constants.REPORT_DIR)

    @property
    def report_file(self) -> str:
        return self.get("analysis.report_file", constants.REPORT_FILE)

    @property
    def report_language(self) -> str:
        return self.get("analysis.language", constants.DEFAULT_LANGUAGE)

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
