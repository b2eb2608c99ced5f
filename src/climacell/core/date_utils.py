"""
Date and timezone utilities.

Centralizes parsing and formatting of the two timestamp encodings the API uses:
RFC3339 date-times with an offset, and bare YYYY-MM-DD calendar dates.
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Optional

import pytz

from .constants import DATE_FORMAT


# Zero point in time, used for anchor timestamps that were never set
ZERO_TIME = pytz.UTC.localize(datetime(1, 1, 1))

_RFC3339_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})\Z",
    re.ASCII,
)
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}\Z", re.ASCII)


class DateUtils:
    """Utilities for API timestamp handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_rfc3339(value: str) -> datetime:
        """
        Parse an offset-aware RFC3339 date-time string.

        Args:
            value: Date-time string (e.g., '2020-03-02T14:00:00Z',
                   '2020-03-02T14:00:00.250+05:30')

        Returns:
            Timezone-aware datetime

        Raises:
            ValueError: If the string is not an RFC3339 date-time
        """
        match = _RFC3339_PATTERN.match(value)
        if not match:
            raise ValueError(f"Invalid RFC3339 timestamp: {value!r}")

        date_part, time_part, fraction, offset = match.groups()
        parsed = datetime.strptime(f"{date_part}T{time_part}", "%Y-%m-%dT%H:%M:%S")

        if fraction:
            # Sub-microsecond digits are truncated
            parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))

        if offset == "Z":
            return pytz.UTC.localize(parsed)

        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if minutes >= 60:
            raise ValueError(f"Invalid RFC3339 offset: {value!r}")
        tz = pytz.FixedOffset(sign * (hours * 60 + minutes))
        return tz.localize(parsed)

    @staticmethod
    def parse_date(value: str) -> datetime:
        """
        Parse a bare YYYY-MM-DD calendar date as naive midnight.

        Raises:
            ValueError: If the string is not a calendar date
        """
        if not _DATE_PATTERN.match(value):
            raise ValueError(f"Invalid date: {value!r}")
        return datetime.strptime(value, DATE_FORMAT)

    @classmethod
    def parse_time_or_date(cls, value: str) -> datetime:
        """
        Parse either encoding, trying the RFC3339 date-time first.

        Args:
            value: RFC3339 date-time or YYYY-MM-DD date string

        Returns:
            Timezone-aware datetime for date-times, naive midnight for dates

        Raises:
            ValueError: If the string matches neither encoding
        """
        try:
            return cls.parse_rfc3339(value)
        except ValueError:
            pass

        try:
            return cls.parse_date(value)
        except ValueError:
            raise ValueError(
                f"Timestamp {value!r} is neither an RFC3339 date-time nor a YYYY-MM-DD date"
            )

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

    @staticmethod
    def format_rfc3339(dt: datetime) -> str:
        """
        Format a datetime as an RFC3339 string with seconds precision.

        Naive datetimes are treated as UTC. UTC is written with a 'Z' suffix,
        other offsets as '+hh:mm'.

        Args:
            dt: Datetime to format

        Returns:
            RFC3339 string (e.g., '2020-03-02T14:00:00Z')
        """
        if dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)

        dt = dt.replace(microsecond=0)
        if dt.utcoffset() == timedelta(0):
            return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
        return dt.isoformat()
