"""
Date and timezone utilities.

Centralizes all date/time operations with proper timezone handling.
"""

from datetime import date, datetime, time
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Brussels', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def to_local(cls, dt: datetime, tz: BaseTzInfo) -> datetime:
        """
        Convert a datetime to local time. Naive datetimes are taken as UTC.

        Args:
            dt: Datetime object (can be naive or aware)
            tz: Target timezone

        Returns:
            Timezone-aware datetime in the target zone
        """
        return cls.to_utc(dt).astimezone(tz)

    @staticmethod
    def local_datetime(day: date, time_of_day: time, tz: BaseTzInfo) -> datetime:
        """
        Combine a calendar day and a wall-clock time in a timezone.

        Uses pytz localize so the offset follows daylight saving time of
        that particular day.
        """
        return tz.localize(datetime.combine(day, time_of_day))

    @staticmethod
    def sunday_based_weekday(day: date) -> int:
        """
        Weekday number with Sunday=0 through Saturday=6.

        Matches strftime('%w').
        """
        return day.isoweekday() % 7
