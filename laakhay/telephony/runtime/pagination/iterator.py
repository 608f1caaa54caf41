"""Lazy, lock-protected iteration over server-paginated list resources.

Architecture:
    A PageIterator holds at most one ResourcePage at a time plus a cursor
    into it. Nothing is fetched until the first pull. When the cursor
    reaches the end of the page, the iterator follows the page's own
    ``next_page_uri`` (never a computed one) and replaces the page.

    Every pull runs under a single asyncio.Lock, including the network
    fetch, so tasks sharing one iterator never see an item twice, never
    skip one, and never trigger two fetches for the same page boundary.

Error Handling:
    API, transport and decode failures are recorded and end the iteration
    for good; ``try_next()`` returns None and ``last_error`` holds the
    cause. Misuse (item type mismatch, pulling with no page loaded) raises.
"""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Generic, TypeVar

from ...core.exceptions import QueryError, TelephonyError
from ...models import APIModel, Call, Message
from .pages import CallPage, JSONTransport, MessagePage, ResourcePage
from .telemetry import log_iteration_complete, log_page_error, log_page_fetched

ItemT = TypeVar("ItemT", bound=APIModel)


class PageIterator(Generic[ItemT]):
    """Stream the items of a paginated resource one at a time.

    Example:
        >>> iterator = client.calls(from_number("+15551231234")).iter()
        >>> async for call in iterator:
        ...     print(call.sid)
        >>> if iterator.last_error is not None:
        ...     raise iterator.last_error
    """

    page_type: type[ResourcePage]
    item_type: type[ItemT]

    def __init__(
        self,
        transport: JSONTransport,
        init_uri: str,
        page_type: type[ResourcePage] | None = None,
        item_type: type[ItemT] | None = None,
    ) -> None:
        if page_type is not None:
            self.page_type = page_type
        if getattr(self, "page_type", None) is None:
            raise TypeError(f"{type(self).__name__} requires a page_type")
        if item_type is not None:
            self.item_type = item_type
        elif getattr(self, "item_type", None) is None:
            self.item_type = self.page_type.item_type

        self._lock = asyncio.Lock()
        self._error: TelephonyError | None = None
        self._page: ResourcePage | None = None
        self._cursor = 0
        self._did_init = False
        self._closed = False
        self._init_uri = init_uri
        self._transport = transport

        self._pages_fetched = 0
        self._items_yielded = 0

    @property
    def last_error(self) -> TelephonyError | None:
        """Error that ended the iteration, or None."""
        return self._error

    @property
    def init_uri(self) -> str:
        return self._init_uri

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def items_yielded(self) -> int:
        return self._items_yielded

    async def try_next(self) -> ItemT | None:
        """Return the next item, or None at the end of the sequence or on error.

        Check ``last_error`` after None to tell a clean end from a failure.

        Raises:
            TypeError: If a page yields an item that is not ``item_type``
            RuntimeError: If no page is loaded when an item is requested
        """
        async with self._lock:
            if self._closed:
                return None

            if not self._did_init:
                page = await self._fetch(self._init_uri)
                if page is None:
                    return None
                self._page = page
                self._cursor = 0
                self._did_init = True

            if self._page is None:
                raise RuntimeError("PageIterator has no page loaded")

            # An empty page may still link onward
            while self._cursor == self._page.size():
                if not self._page.has_next_page():
                    self._finish()
                    return None
                page = await self._fetch(self._page.next_page_uri, current=self._page)
                if page is None:
                    return None
                self._page = page
                self._cursor = 0

            item = self._page.item_at(self._cursor)
            if not isinstance(item, self.item_type):
                raise TypeError(
                    f"PageIterator tried to load {type(item).__name__} "
                    f"into {self.item_type.__name__}"
                )
            self._cursor += 1
            self._items_yielded += 1
            return item

    async def _fetch(
        self, uri: str | None, current: ResourcePage | None = None
    ) -> ResourcePage | None:
        """Load a page; on failure record the error, close, and return None."""
        start = perf_counter()
        try:
            if current is not None:
                page = await current.fetch_next_page(self._transport)
            elif not uri:
                raise QueryError("PageIterator initial URI is empty")
            else:
                page = await self.page_type.load(self._transport, uri)
        except TelephonyError as e:
            self._error = e
            self._closed = True
            log_page_error(
                resource=self.page_type.__name__,
                uri=uri,
                error_type=type(e).__name__,
                error_message=str(e),
                items_yielded=self._items_yielded,
            )
            return None

        self._pages_fetched += 1
        log_page_fetched(
            resource=self.page_type.__name__,
            uri=uri or "",
            page=page.page,
            items=page.size(),
            has_next=page.has_next_page(),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page

    def _finish(self) -> None:
        if not self._closed:
            self._closed = True
            log_iteration_complete(
                resource=self.page_type.__name__,
                pages_fetched=self._pages_fetched,
                items_yielded=self._items_yielded,
            )

    def __aiter__(self) -> PageIterator[ItemT]:
        return self

    async def __anext__(self) -> ItemT:
        item = await self.try_next()
        if item is None:
            raise StopAsyncIteration
        return item


class CallIterator(PageIterator[Call]):
    """Iterates Call results across pages."""

    page_type = CallPage
    item_type = Call


class MessageIterator(PageIterator[Message]):
    """Iterates Message results across pages."""

    page_type = MessagePage
    item_type = Message
