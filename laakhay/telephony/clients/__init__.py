"""Client facades."""

from .client import TelephonyClient

__all__ = ["TelephonyClient"]
