"""High-level client for calls, messages and phone-number lookups.

Start with explicit credentials:

    >>> async with TelephonyClient("AC...", "token") as client:
    ...     msg = await client.send_sms("+15551231234", "+15559879876", "Hello, world!")

Commonly used actions have convenience methods (``call``, ``send_sms``,
``lookup``). For more complicated requests, build the request model and
submit it:

    >>> req = MessageRequest(
    ...     from_="+15559871234",
    ...     to="+15551231234",
    ...     body="Hello, world!",
    ...     status_callback="https://post.here.com/when/msg/status/changes.twiml",
    ... )
    >>> msg = await client.submit_message(req)

These actions incur the appropriate costs on the account.
"""

from __future__ import annotations

import logging
from typing import Any

from ..api.query import CallListQuery, ListQueryConf, MessageListQuery
from ..config import ClientConfig
from ..endpoints import (
    build_calls_path,
    build_messages_path,
    get_endpoint_adapter,
    get_endpoint_spec,
)
from ..models import Call, CallRequest, Lookup, LookupRequest, Message, MessageRequest
from ..runtime.rest import RestRunner, RESTTransport

logger = logging.getLogger(__name__)


class TelephonyClient:
    """Client bound to one account.

    Credentials are always passed in explicitly (or through a
    ``ClientConfig``); nothing is read from the environment here. A prebuilt
    transport can be injected, which is how tests run without a network.
    """

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        if config is None:
            if account_sid is None or auth_token is None:
                raise ValueError("account_sid and auth_token are required without a config")
            config = ClientConfig(account_sid=account_sid, auth_token=auth_token)
        self.config = config
        self._transport = transport or RESTTransport(
            base_url=config.base_url,
            auth=(config.account_sid, config.auth_token),
            timeout=config.timeout,
        )
        self._runner = RestRunner(self._transport)

    @property
    def account_sid(self) -> str:
        return self.config.account_sid

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Run a registered single-request endpoint.

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {
            **params,
            "account_sid": self.config.account_sid,
            "lookup_url": self.config.lookup_url,
        }
        logger.debug("endpoint_request", extra={"endpoint_id": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    # --- Calls ---------------------------------------------------------------

    def calls(self, *confs: ListQueryConf) -> CallListQuery:
        """Start a call listing query.

        Example:
            >>> iterator = client.calls(
            ...     started_before("2014-01-01"),
            ...     to_number("+15551231234"),
            ... ).iter()
        """
        path = build_calls_path({"account_sid": self.config.account_sid})
        return CallListQuery(self._transport, path, *confs)

    async def submit_call(self, request: CallRequest) -> Call:
        """Place a call, sending only the non-empty request fields."""
        return await self.fetch("create_call", {"request": request})

    async def call(self, from_: str, to: str, callback_url: str) -> Call:
        """Call ``to`` from ``from_``; the API POSTs call progress to ``callback_url``.

        Details:
            https://www.twilio.com/docs/api/twiml/twilio_request
        """
        return await self.submit_call(CallRequest(from_=from_, to=to, url=callback_url))

    async def recorded_call(self, from_: str, to: str, callback_url: str) -> Call:
        """Same as ``call``, but recorded."""
        return await self.submit_call(
            CallRequest(from_=from_, to=to, url=callback_url, record=True)
        )

    # --- Messages ------------------------------------------------------------

    def messages(self, *confs: ListQueryConf) -> MessageListQuery:
        """Start a message listing query.

        Example:
            >>> iterator = client.messages(
            ...     sent_after("2014-01-01"),
            ...     from_number("+15551231234"),
            ... ).iter()
        """
        path = build_messages_path({"account_sid": self.config.account_sid})
        return MessageListQuery(self._transport, path, *confs)

    async def submit_message(self, request: MessageRequest) -> Message:
        return await self.fetch("create_message", {"request": request})

    async def send_sms(self, from_: str, to: str, body: str) -> Message:
        return await self.send_mms(from_, to, body, "")

    async def send_mms(self, from_: str, to: str, body: str, media_url: str) -> Message:
        return await self.submit_message(
            MessageRequest(from_=from_, to=to, body=body, media_url=media_url)
        )

    # --- Lookups -------------------------------------------------------------

    async def submit_lookup(self, request: LookupRequest) -> Lookup:
        return await self.fetch("lookup", {"request": request})

    async def lookup(self, phone_number: str) -> Lookup:
        """Look up a number including its carrier (``carrier.type`` is
        "mobile", "landline" or "voip")."""
        return await self.submit_lookup(LookupRequest(phone_number=phone_number, type="carrier"))

    async def lookup_no_carrier(self, phone_number: str) -> Lookup:
        return await self.submit_lookup(LookupRequest(phone_number=phone_number))

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> TelephonyClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
