"""Phone-number lookup models.

Details:
    https://www.twilio.com/docs/api/rest/lookups
"""

from __future__ import annotations

from pydantic import Field

from .base import APIModel


class Carrier(APIModel):
    """Carrier details, present only when the lookup asked for them."""

    error_code: int | None = None
    mobile_country_code: str | None = None
    mobile_network_code: str | None = None
    name: str | None = None
    type: str | None = None  # "mobile", "landline" or "voip"


class Lookup(APIModel):
    carrier: Carrier | None = None
    country_code: str | None = None
    national_format: str | None = None
    phone_number: str | None = None
    url: str | None = None


class LookupRequest(APIModel):
    """Parameters for a lookup; empty fields are not sent."""

    phone_number: str = Field(..., min_length=1)
    type: str = ""
    country_code: str = ""

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.type:
            query["Type"] = self.type
        if self.country_code:
            query["CountryCode"] = self.country_code
        return query
