"""Call resource and call request models.

Details:
    https://www.twilio.com/docs/api/rest/call
    https://www.twilio.com/docs/api/rest/making-calls
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .base import APIModel, coerce_api_datetime, serialize_api_datetime

_DATE_FIELDS = ("date_created", "date_updated", "start_time", "end_time")


class CallSubresourceURIs(APIModel):
    notifications: str | None = None
    recordings: str | None = None


class Call(APIModel):
    """A call as returned by the calls endpoints."""

    sid: str = Field(..., min_length=1)
    account_sid: str | None = None
    annotation: str | None = None
    answered_by: str | None = None
    api_version: str | None = None
    caller_name: str | None = None
    date_created: datetime | None = None
    date_updated: datetime | None = None
    direction: str | None = None
    duration: str | None = None
    forwarded_from: str | None = None
    from_: str | None = Field(None, alias="from")
    group_sid: str | None = None
    parent_call_sid: str | None = None
    phone_number_sid: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: str | None = None
    subresource_uris: CallSubresourceURIs = Field(default_factory=CallSubresourceURIs)
    to: str | None = None
    uri: str | None = None

    @field_validator(*_DATE_FIELDS, mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        return coerce_api_datetime(v)

    @field_serializer(*_DATE_FIELDS)
    def serialize_dates(self, v: datetime | None) -> str | None:
        return serialize_api_datetime(v)


class CallRequest(APIModel):
    """Parameters for placing an outbound call.

    Only ``from_`` and ``to`` are always sent. Every other field is sent
    only when it holds a non-zero value.
    """

    from_: str = Field(..., alias="from", min_length=1)
    to: str = Field(..., min_length=1)
    url: str = ""
    application_sid: str = ""
    method: str = ""
    fallback_url: str = ""
    fallback_method: str = ""
    status_callback: str = ""
    status_callback_method: str = ""
    send_digits: str = ""
    if_machine: str = ""
    timeout: int = Field(0, ge=0)
    record: bool = False

    def to_form(self) -> dict[str, str]:
        """Build the form body for the create-call endpoint."""
        form = {"From": self.from_, "To": self.to}
        optional = {
            "Url": self.url,
            "ApplicationSid": self.application_sid,
            "Method": self.method,
            "FallbackUrl": self.fallback_url,
            "FallbackMethod": self.fallback_method,
            "StatusCallback": self.status_callback,
            "StatusCallbackMethod": self.status_callback_method,
            "SendDigits": self.send_digits,
            "IfMachine": self.if_machine,
        }
        form.update({key: value for key, value in optional.items() if value})
        if self.timeout > 0:
            form["Timeout"] = str(self.timeout)
        if self.record:
            form["Record"] = "true"
        return form
