"""
Sunrise/sunset page parser.

Turns the yearly HTML table of the Royal Observatory into SunRow objects.
"""

import logging
from datetime import datetime
from typing import List, Optional

from bs4 import BeautifulSoup  # type: ignore
from bs4.element import Tag  # type: ignore

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.errors import ParseError
from ..models import SunRow

# Column positions within a data row
COL_DATE = 0
COL_SUNRISE_END = 1
COL_SUNSET_END = 2
COL_DURATION = 3
COL_SUNRISE_START = 4
COL_SUNSET_START = 5


def parse_int(text: str) -> int:
    """
    Drop all non-numeric characters and parse the remainder as an integer.

    Raises:
        ValueError: If no digits remain
    """
    return int("".join(char for char in text if char.isdigit()))


class SunPageParser:
    """Parse sunrise/sunset rows out of one yearly page."""

    def __init__(
        self,
        timezone: str = constants.DEFAULT_TIMEZONE,
        min_duration: int = constants.MIN_DURATION_MINUTES,
        max_duration: int = constants.MAX_DURATION_MINUTES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize parser.

        Args:
            timezone: Timezone the table times are expressed in
            min_duration: Smallest accepted sunrise/sunset duration (minutes)
            max_duration: Largest accepted sunrise/sunset duration (minutes)
            logger: Logger instance
        """
        self.tz = DateUtils.parse_timezone(timezone)
        self.min_duration = min_duration
        self.max_duration = max_duration
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, html: str) -> List[SunRow]:
        """
        Parse all data rows of a page.

        Rows without exactly six cells are headers or spacers and are
        skipped.

        Args:
            html: Page content

        Returns:
            Parsed rows in page order

        Raises:
            ParseError: If a data row holds an unparseable or out of range value
        """
        soup = BeautifulSoup(html, "html.parser")
        rows: List[SunRow] = []
        skipped = 0

        for tr in soup.find_all("tr"):
            cells = tr.find_all("td")
            if len(cells) != constants.SUN_ROW_COLUMNS:
                skipped += 1
                continue
            rows.append(self.parse_row(tr, [cell.get_text().strip() for cell in cells]))

        self.logger.debug(f"Parsed {len(rows)} rows, skipped {skipped} non-data rows")
        return rows

    def parse_row(self, tr: Tag, texts: List[str]) -> SunRow:
        """Parse the six cell texts of one table row."""
        date = self._parse_date(tr, texts[COL_DATE])
        duration = self._parse_duration(tr, texts[COL_DURATION])

        return SunRow(
            date=date,
            sunrise_start=self._parse_time(tr, texts[COL_SUNRISE_START], date, "sunrise start"),
            sunrise_end=self._parse_time(tr, texts[COL_SUNRISE_END], date, "sunrise end"),
            sunset_start=self._parse_time(tr, texts[COL_SUNSET_START], date, "sunset start"),
            sunset_end=self._parse_time(tr, texts[COL_SUNSET_END], date, "sunset end"),
            duration_minutes=duration,
        )

    def _error(self, tr: Tag, message: str, value: str) -> ParseError:
        return ParseError(message, {"value": value, "selection": str(tr)})

    def _parse_date(self, tr: Tag, text: str) -> datetime:
        try:
            day = datetime.strptime(text, constants.SUN_DATE_FORMAT).date()
        except ValueError:
            raise self._error(tr, "Failed to parse date of row", text)
        return DateUtils.local_datetime(day, datetime.min.time(), self.tz)

    def _parse_time(self, tr: Tag, text: str, date: datetime, field: str) -> datetime:
        try:
            time_of_day = datetime.strptime(text.strip(), constants.SUN_TIME_FORMAT).time()
        except ValueError:
            raise self._error(tr, f"Failed to parse {field} of row", text)
        return DateUtils.local_datetime(date.date(), time_of_day, self.tz)

    def _parse_duration(self, tr: Tag, text: str) -> int:
        try:
            minutes = parse_int(text)
        except ValueError:
            raise self._error(tr, "Failed to parse duration of row", text)

        if not self.min_duration <= minutes <= self.max_duration:
            raise self._error(
                tr,
                f"Duration of {minutes} outside allowed range of "
                f"{self.min_duration} to {self.max_duration} minutes",
                text
            )
        return minutes
