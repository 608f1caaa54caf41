"""Core components."""

from .exceptions import (
    APIError,
    DecodeError,
    QueryError,
    TelephonyError,
    TransportError,
    check_json,
    coerce_code,
)

__all__ = [
    "TelephonyError",
    "APIError",
    "TransportError",
    "DecodeError",
    "QueryError",
    "check_json",
    "coerce_code",
]
