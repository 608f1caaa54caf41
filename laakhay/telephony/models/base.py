"""Shared base for API resource models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..utils.dates import format_api_datetime, parse_api_datetime


class APIModel(BaseModel):
    """Immutable model decoded from an API payload.

    Unknown payload keys are ignored so new server fields never break
    decoding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def coerce_api_datetime(value: Any) -> Any:
    """Turn an RFC 1123 string into a datetime; empty strings become None."""
    if isinstance(value, str):
        return parse_api_datetime(value) if value else None
    return value


def serialize_api_datetime(value: datetime | None) -> str | None:
    return format_api_datetime(value) if value is not None else None
