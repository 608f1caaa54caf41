"""Shared telephony API constants and client configuration.

This module centralizes the hosts, API version and date formats used by
the REST transport, the endpoint specs and the list query builder so the
client facade can stay small and focused.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Account-scoped REST resources (calls, messages) and their pagination
# links are served from BASE_URL. Lookups live on a separate host.
BASE_URL = "https://api.twilio.com"
LOOKUP_URL = "https://lookups.twilio.com/v1"

# At the time of writing, the current API version was released on Apr. 1, 2010
API_VERSION = "2010-04-01"

# Date filters on list endpoints are day-granular
YMD_FORMAT = "%Y-%m-%d"

# Date-time fields in payloads are RFC 1123 with a numeric zone,
# e.g. "Tue, 31 Aug 2010 20:36:28 +0000" (see utils/dates.py)

DEFAULT_TIMEOUT = 30.0


def get_account_prefix(account_sid: str) -> str:
    """Get the account-scoped path prefix.

    Args:
        account_sid: Account SID

    Returns:
        Relative path prefix for account resources

    Examples:
        >>> get_account_prefix("AC123")
        '/2010-04-01/Accounts/AC123'
    """
    return f"/{API_VERSION}/Accounts/{account_sid}"


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and hosts for a TelephonyClient.

    Attributes:
        account_sid: Account SID used for basic auth and account paths
        auth_token: Auth token used for basic auth
        base_url: Host for account resources and their next-page links
        lookup_url: Host and version prefix for phone-number lookups
        timeout: Total HTTP request timeout in seconds
    """

    account_sid: str
    auth_token: str
    base_url: str = BASE_URL
    lookup_url: str = LOOKUP_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.account_sid:
            raise ValueError("account_sid must be a non-empty string")
        if not self.auth_token:
            raise ValueError("auth_token must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls, prefix: str = "TWILIO_") -> ClientConfig:
        """Build a config from environment variables.

        Reads ``<prefix>ACCOUNT_SID`` and ``<prefix>AUTH_TOKEN`` (required) and
        ``<prefix>BASE_URL`` / ``<prefix>LOOKUP_URL`` (optional).

        Raises:
            ValueError: If a required variable is unset
        """
        account_sid = os.environ.get(f"{prefix}ACCOUNT_SID", "")
        auth_token = os.environ.get(f"{prefix}AUTH_TOKEN", "")
        if not account_sid:
            raise ValueError(f"Environment variable {prefix}ACCOUNT_SID is unset")
        if not auth_token:
            raise ValueError(f"Environment variable {prefix}AUTH_TOKEN is unset")
        return cls(
            account_sid=account_sid,
            auth_token=auth_token,
            base_url=os.environ.get(f"{prefix}BASE_URL", BASE_URL),
            lookup_url=os.environ.get(f"{prefix}LOOKUP_URL", LOOKUP_URL),
        )
