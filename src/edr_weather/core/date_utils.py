"""
Date and timezone utilities.

Centralizes timestamp parsing, UTC day keys and local display labels.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Helsinki', 'UTC')

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
    def parse_timestamp(timestamp: str) -> datetime:
        """
        Parse an ISO 8601 timestamp into an aware UTC datetime.

        Accepts a trailing 'Z' and fractional seconds. Naive timestamps are taken as UTC.

        Raises:
            ValueError: If the string is not ISO 8601
        """
        text = timestamp.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return pytz.UTC.localize(parsed)
        return parsed.astimezone(pytz.UTC)

    @classmethod
    def to_epoch_millis(cls, timestamp: str) -> int:
        """Convert an ISO timestamp to epoch milliseconds."""
        dt = cls.parse_timestamp(timestamp)
        epoch = datetime(1970, 1, 1, tzinfo=pytz.UTC)
        return (dt - epoch) // timedelta(milliseconds=1)

    @staticmethod
    def utc_date_key(timestamp: str) -> str:
        """
        Get the UTC calendar date (YYYY-MM-DD) of an ISO timestamp.

        Timestamps with an explicit offset are shifted to UTC first.
        """
        dt = DateUtils.parse_timestamp(timestamp)
        return dt.strftime("%Y-%m-%d")

    def format_local_label(
        self,
        timestamp: str,
        timezone_str: str,
        fmt: str = "%H:%M"
    ) -> str:
        """
        Format an ISO timestamp as a label in a display timezone.

        Args:
            timestamp: ISO timestamp
            timezone_str: Display timezone (e.g., 'Europe/Helsinki')
            fmt: strftime format

        Returns:
            Formatted local time label
        """
        tz = self.parse_timezone(timezone_str)
        return self.parse_timestamp(timestamp).astimezone(tz).strftime(fmt)

    @staticmethod
    def to_iso_utc(dt: datetime) -> str:
        """
        Format a datetime as an ISO string in UTC with a 'Z' suffix.

        Naive datetimes are taken as UTC.
        """
        if dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        dt = dt.astimezone(pytz.UTC).replace(microsecond=0)
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")

    @classmethod
    def format_datetime_range(cls, start: datetime, end: datetime) -> str:
        """Format an EDR datetime interval 'start/end'."""
        if end < start:
            raise ValueError(f"Range end {end} is before start {start}")
        return f"{cls.to_iso_utc(start)}/{cls.to_iso_utc(end)}"

    def get_utc_day_range(self, date_str: str) -> Tuple[str, str]:
        """
        Get the full UTC day range for a date.

        Args:
            date_str: Date in YYYY-MM-DD format

        Returns:
            Tuple of (start, end) ISO strings, e.g.
            ('2025-11-24T00:00:00Z', '2025-11-24T23:59:59Z')
        """
        day = datetime.strptime(date_str, "%Y-%m-%d")
        start = pytz.UTC.localize(day)
        end = start + timedelta(days=1) - timedelta(seconds=1)
        self.logger.debug(f"UTC day range for {date_str}: {start.isoformat()} to {end.isoformat()}")
        return self.to_iso_utc(start), self.to_iso_utc(end)

    @staticmethod
    def hours_ahead(hours: int, reference_time: Optional[datetime] = None) -> Tuple[datetime, datetime]:
        """
        Get a (now, now + hours) window in UTC.

        Args:
            hours: Window length in hours
            reference_time: Reference time (defaults to now in UTC)
        """
        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)
        return reference_time, reference_time + timedelta(hours=hours)

    @staticmethod
    def days_from_midnight(days: int, reference_time: Optional[datetime] = None) -> Tuple[datetime, datetime]:
        """
        Get a window starting at today's UTC midnight and spanning the given days.

        Args:
            days: Window length in days
            reference_time: Reference time (defaults to now in UTC)
        """
        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)
        start = reference_time.astimezone(pytz.UTC).replace(hour=0, minute=0, second=0, microsecond=0)
        return start, start + timedelta(days=days)
