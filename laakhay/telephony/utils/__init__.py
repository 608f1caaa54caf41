"""Utility helpers."""

from .dates import format_api_datetime, format_ymd, parse_api_datetime
from .http import HTTPClient

__all__ = [
    "HTTPClient",
    "format_api_datetime",
    "format_ymd",
    "parse_api_datetime",
]
