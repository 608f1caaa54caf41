"""Message (SMS/MMS) resource and message request models.

Details:
    https://www.twilio.com/docs/api/rest/message
    https://www.twilio.com/docs/api/rest/sending-messages
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .base import APIModel, coerce_api_datetime, serialize_api_datetime

_DATE_FIELDS = ("date_created", "date_sent", "date_updated")


class MessageSubresourceURIs(APIModel):
    media: str | None = None


class Message(APIModel):
    """A message as returned by the messages endpoints."""

    sid: str = Field(..., min_length=1)
    account_sid: str | None = None
    api_version: str | None = None
    body: str | None = None
    date_created: datetime | None = None
    date_sent: datetime | None = None
    date_updated: datetime | None = None
    direction: str | None = None
    error_code: int | None = None
    error_message: str | None = None
    from_: str | None = Field(None, alias="from")
    num_media: str | None = None
    num_segments: str | None = None
    status: str | None = None
    subresource_uris: MessageSubresourceURIs = Field(default_factory=MessageSubresourceURIs)
    to: str | None = None
    uri: str | None = None

    @field_validator(*_DATE_FIELDS, mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        return coerce_api_datetime(v)

    @field_serializer(*_DATE_FIELDS)
    def serialize_dates(self, v: datetime | None) -> str | None:
        return serialize_api_datetime(v)

    @property
    def failed(self) -> bool:
        """True when the API attached a delivery error to the message."""
        return bool(self.error_code)


class MessageRequest(APIModel):
    """Parameters for sending a message.

    ``from_``, ``to`` and ``body`` are always sent. The remaining fields are
    sent only when set.
    """

    from_: str = Field(..., alias="from", min_length=1)
    to: str = Field(..., min_length=1)
    body: str = ""
    media_url: str = ""
    status_callback: str = ""
    application_sid: str = ""

    def to_form(self) -> dict[str, str]:
        """Build the form body for the create-message endpoint."""
        form = {"From": self.from_, "To": self.to, "Body": self.body}
        if self.media_url:
            form["MediaUrl"] = self.media_url
        if self.status_callback:
            form["StatusCallback"] = self.status_callback
        if self.application_sid:
            form["ApplicationSid"] = self.application_sid
        return form
