"""Shared fixtures for unit tests: an in-memory transport and page payloads."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

ACCOUNT_SID = "AC00000000000000000000000000000000"
CALLS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls.json"
MESSAGES_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/Messages.json"


class FakeTransport:
    """Serves canned payloads by URI and records every request.

    A response that is an exception instance is raised instead of returned.
    ``in_flight``/``max_in_flight`` track overlapping requests.
    """

    def __init__(self, responses: dict[str, Any], delay: float = 0.0) -> None:
        self.responses = responses
        self.delay = delay
        self.requests: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_json(self, uri: str, params: dict[str, Any] | None = None) -> Any:
        self.requests.append(uri)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            payload = self.responses[uri]
            if isinstance(payload, BaseException):
                raise payload
            return payload
        finally:
            self.in_flight -= 1

    def count(self, uri: str) -> int:
        return self.requests.count(uri)


def _page_payload(
    key: str,
    sids: list[str],
    *,
    page: int = 0,
    page_size: int = 50,
    next_page_uri: str | None = None,
    previous_page_uri: str | None = None,
    path: str = CALLS_PATH,
) -> dict[str, Any]:
    return {
        key: [{"sid": sid, "from": "+15551230000", "to": "+15559870000"} for sid in sids],
        "page": page,
        "page_size": page_size,
        "num_pages": 2,
        "start": page * page_size,
        "end": page * page_size + max(len(sids) - 1, 0),
        "total": 60,
        "uri": f"{path}?Page={page}&PageSize={page_size}",
        "first_page_uri": f"{path}?Page=0&PageSize={page_size}",
        "last_page_uri": f"{path}?Page=1&PageSize={page_size}",
        "previous_page_uri": previous_page_uri,
        "next_page_uri": next_page_uri,
    }


@pytest.fixture
def make_transport() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def call_page() -> Callable[..., dict[str, Any]]:
    """Build a calls list payload: ``call_page(["CA1", "CA2"], next_page_uri=...)``."""

    def build(sids: list[str], **kwargs: Any) -> dict[str, Any]:
        return _page_payload("calls", sids, path=CALLS_PATH, **kwargs)

    return build


@pytest.fixture
def message_page() -> Callable[..., dict[str, Any]]:
    """Build a messages list payload."""

    def build(sids: list[str], **kwargs: Any) -> dict[str, Any]:
        return _page_payload("messages", sids, path=MESSAGES_PATH, **kwargs)

    return build
