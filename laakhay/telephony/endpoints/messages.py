"""Messages endpoint definitions and adapter.

The same path serves the paginated message listing (GET) and message
sending (POST).
"""

from __future__ import annotations

from typing import Any

from laakhay.telephony.config import get_account_prefix
from laakhay.telephony.models import Message, MessageRequest
from laakhay.telephony.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the account-scoped messages path."""
    return f"{get_account_prefix(params['account_sid'])}/Messages.json"


def build_form(params: dict[str, Any]) -> dict[str, str]:
    request: MessageRequest = params["request"]
    return request.to_form()


# Endpoint specification
SPEC = RestEndpointSpec(
    id="create_message",
    method="POST",
    build_path=build_path,
    build_form=build_form,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a sent message."""

    model = Message
