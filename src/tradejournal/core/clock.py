"""Timestamp and calendar-date utilities.

Timestamps are timezone-aware UTC datetimes truncated to millisecond
precision, matching the int64 epoch-millis representation used by the
local store and the sync cursor.
"""

from datetime import date, datetime, timedelta
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop sub-millisecond precision from a datetime."""
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming naive values are already UTC."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def now_utc() -> datetime:
    """Return the current UTC time at millisecond precision."""
    return truncate_to_millis(datetime.now(UTC))


def to_epoch_millis(dt: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch."""
    return (to_utc(dt) - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(value: int) -> datetime:
    """Convert integer epoch milliseconds to a UTC datetime."""
    return EPOCH + timedelta(milliseconds=int(value))


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp string into a UTC datetime.

    If no timezone is present in the string, UTC is assumed.
    """
    return truncate_to_millis(to_utc(date_parser.isoparse(value)))


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as ISO-8601 in UTC with millisecond precision."""
    return to_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_date(value: date) -> str:
    """Format a calendar date as YYYY-MM-DD."""
    return value.isoformat()


def month_key(value: date) -> str:
    """Return the YYYY-MM bucket key for a calendar date."""
    return f"{value.year:04d}-{value.month:02d}"


def parse_local_date(value: str) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None when it is not a valid date."""
    parts = (value or "").strip().split("-")
    if len(parts) != 3:
        return None
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        return None


def previous_day(value: date) -> date:
    """Return the calendar day before the given date."""
    return value - timedelta(days=1)
