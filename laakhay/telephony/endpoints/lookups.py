"""Phone-number lookup endpoint definition and adapter.

Lookups are served from their own host, so the path is absolute.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from laakhay.telephony.config import LOOKUP_URL
from laakhay.telephony.models import Lookup, LookupRequest
from laakhay.telephony.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the absolute lookup URL for a phone number."""
    request: LookupRequest = params["request"]
    lookup_url = params.get("lookup_url") or LOOKUP_URL
    return f"{lookup_url.rstrip('/')}/PhoneNumbers/{quote(request.phone_number, safe='+')}"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    request: LookupRequest = params["request"]
    return request.to_query()


# Endpoint specification
SPEC = RestEndpointSpec(
    id="lookup",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a lookup result."""

    model = Lookup
