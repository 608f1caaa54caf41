"""Unit tests for TelephonyClient with a mocked transport."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.telephony import (
    ClientConfig,
    TelephonyClient,
    from_number,
    started_after,
)
from laakhay.telephony.core import APIError, DecodeError
from laakhay.telephony.models import Call, CallRequest, Lookup, Message, MessageRequest
from laakhay.telephony.runtime.pagination import CallIterator, MessageIterator

ACCOUNT = "AC1"
CALLS = "/2010-04-01/Accounts/AC1/Calls.json"
MESSAGES = "/2010-04-01/Accounts/AC1/Messages.json"


def mocked_client(**transport_methods) -> tuple[TelephonyClient, MagicMock]:
    transport = MagicMock()
    for name, value in transport_methods.items():
        setattr(transport, name, AsyncMock(return_value=value))
    transport.close = AsyncMock()
    return TelephonyClient(ACCOUNT, "token", transport=transport), transport


class TestConstruction:
    def test_requires_credentials(self):
        with pytest.raises(ValueError):
            TelephonyClient()

    def test_from_config(self):
        config = ClientConfig(account_sid="AC9", auth_token="t", base_url="https://api.example.com")
        client = TelephonyClient(config=config)
        assert client.account_sid == "AC9"
        assert client.transport.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self):
        client, transport = mocked_client()
        async with client:
            pass
        transport.close.assert_awaited_once()


class TestCalls:
    @pytest.mark.asyncio
    async def test_submit_call_posts_non_empty_fields(self):
        client, transport = mocked_client(post_form={"sid": "CA1", "status": "queued"})

        call = await client.submit_call(
            CallRequest(from_="+1", to="+2", url="https://cb.example.com", timeout=30, record=True)
        )

        assert isinstance(call, Call)
        assert call.sid == "CA1"
        transport.post_form.assert_awaited_once_with(
            CALLS,
            {
                "From": "+1",
                "To": "+2",
                "Url": "https://cb.example.com",
                "Timeout": "30",
                "Record": "true",
            },
        )

    @pytest.mark.asyncio
    async def test_call_and_recorded_call(self):
        client, transport = mocked_client(post_form={"sid": "CA1"})

        await client.call("+1", "+2", "https://cb")
        await client.recorded_call("+1", "+2", "https://cb")

        first, second = (c.args[1] for c in transport.post_form.await_args_list)
        assert "Record" not in first
        assert second["Record"] == "true"

    @pytest.mark.asyncio
    async def test_undecodable_response(self):
        client, _ = mocked_client(post_form={"status": "queued"})
        with pytest.raises(DecodeError):
            await client.call("+1", "+2", "https://cb")

    @pytest.mark.asyncio
    async def test_api_error_propagates(self):
        client, transport = mocked_client()
        transport.post_form = AsyncMock(side_effect=APIError("bad To", code=21211))
        with pytest.raises(APIError) as exc:
            await client.call("+1", "bogus", "https://cb")
        assert str(exc.value) == "Code 21211: bad To"

    def test_calls_query(self):
        client, transport = mocked_client()

        iterator = client.calls(from_number("+1"), started_after("2014-01-01")).iter()

        assert isinstance(iterator, CallIterator)
        assert iterator.init_uri == f"{CALLS}?From=%2B1&StartTime%3E=2014-01-01"
        transport.get_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_calls_iteration_through_client(self):
        client, transport = mocked_client()
        transport.get_json = AsyncMock(
            return_value={"calls": [{"sid": "CA1"}, {"sid": "CA2"}], "next_page_uri": None}
        )

        sids = [call.sid async for call in client.calls().iter()]

        assert sids == ["CA1", "CA2"]
        transport.get_json.assert_awaited_once_with(CALLS)


class TestMessages:
    @pytest.mark.asyncio
    async def test_send_sms(self):
        client, transport = mocked_client(post_form={"sid": "SM1", "body": "Hello, world!"})

        msg = await client.send_sms("+1", "+2", "Hello, world!")

        assert isinstance(msg, Message)
        transport.post_form.assert_awaited_once_with(
            MESSAGES, {"From": "+1", "To": "+2", "Body": "Hello, world!"}
        )

    @pytest.mark.asyncio
    async def test_send_mms(self):
        client, transport = mocked_client(post_form={"sid": "SM1"})

        await client.send_mms("+1", "+2", "pic", "https://i.example.com/a.png")

        form = transport.post_form.await_args.args[1]
        assert form["MediaUrl"] == "https://i.example.com/a.png"

    @pytest.mark.asyncio
    async def test_submit_message_optional_fields(self):
        client, transport = mocked_client(post_form={"sid": "SM1"})

        await client.submit_message(
            MessageRequest(from_="+1", to="+2", body="hi", status_callback="https://s", application_sid="AP1")
        )

        form = transport.post_form.await_args.args[1]
        assert form["StatusCallback"] == "https://s"
        assert form["ApplicationSid"] == "AP1"
        assert "MediaUrl" not in form

    def test_messages_query(self):
        client, _ = mocked_client()
        iterator = client.messages().iter()
        assert isinstance(iterator, MessageIterator)
        assert iterator.init_uri == MESSAGES


class TestLookups:
    @pytest.mark.asyncio
    async def test_lookup_with_carrier(self):
        client, transport = mocked_client(
            get_json={
                "phone_number": "+15551231234",
                "country_code": "US",
                "carrier": {"type": "mobile", "name": "Carrier", "error_code": None},
            }
        )

        lookup = await client.lookup("+15551231234")

        assert isinstance(lookup, Lookup)
        assert lookup.carrier.type == "mobile"
        transport.get_json.assert_awaited_once_with(
            "https://lookups.twilio.com/v1/PhoneNumbers/+15551231234", params={"Type": "carrier"}
        )

    @pytest.mark.asyncio
    async def test_lookup_no_carrier_sends_no_query(self):
        client, transport = mocked_client(get_json={"phone_number": "+1", "carrier": None})

        lookup = await client.lookup_no_carrier("+1")

        assert lookup.carrier is None
        transport.get_json.assert_awaited_once_with(
            "https://lookups.twilio.com/v1/PhoneNumbers/+1", params=None
        )

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self):
        client, _ = mocked_client()
        with pytest.raises(ValueError, match="Unknown REST endpoint"):
            await client.fetch("recordings", {})
