"""
Sunrise/sunset data models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List


@dataclass
class SunRow:
    """One day of the sunrise/sunset table, in local time."""

    date: datetime
    sunrise_start: datetime
    sunrise_end: datetime
    sunset_start: datetime
    sunset_end: datetime
    duration_minutes: int  # duration of sunrise and sunset

    def to_csv_row(self) -> List[str]:
        """Serialize timestamps as ISO-8601 with offset."""
        return [
            self.date.isoformat(),
            self.sunrise_start.isoformat(),
            self.sunrise_end.isoformat(),
            self.sunset_start.isoformat(),
            self.sunset_end.isoformat(),
            str(self.duration_minutes),
        ]
