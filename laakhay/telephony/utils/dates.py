"""Date helpers for API payloads and list filters."""

from __future__ import annotations

from datetime import date, datetime
from email.utils import format_datetime, parsedate_to_datetime

from ..config import YMD_FORMAT


def parse_api_datetime(value: str) -> datetime:
    """Parse an RFC 1123 date-time with numeric zone.

    Day and month names are always English, whatever the process locale.

    Raises:
        ValueError: If the value is not an RFC 1123 date-time

    Examples:
        >>> parse_api_datetime("Tue, 31 Aug 2010 20:36:28 +0000").year
        2010
    """
    return parsedate_to_datetime(value)


def format_api_datetime(value: datetime) -> str:
    """Format a datetime the way the API emits it."""
    return format_datetime(value)


def format_ymd(value: str | date | datetime) -> str:
    """Normalize a date filter value to ``YYYY-MM-DD``.

    Strings are passed through unchanged. Dates and datetimes keep only
    year, month and day.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime)):
        return value.strftime(YMD_FORMAT)
    raise TypeError(f"Expected str, date or datetime, got {type(value).__name__}")
