"""List query builder for paginated call and message listings.

Architecture:
    A ListQuery collects URL query filters for one list endpoint and turns
    them into the starting URI of a PageIterator. Filters are plain
    configuration functions (``ListQueryConf``) that receive the query and
    set a key, so new filters never require changes to the query class:

        >>> iterator = client.calls(
        ...     started_after("2014-01-01"),
        ...     to_number("+15551231234"),
        ... ).iter()

    The same filters are also exposed as chainable methods:

        >>> iterator = client.messages().from_number("+15551231234").sent_after(day).iter()

Design Decisions:
    - Last write wins: setting a key again replaces its value, in call order
    - Date filters accept "YYYY-MM-DD" strings or date/datetime values
    - Keys are encoded in sorted order so equal filters give equal URIs
    - Queries are configured by one caller before ``iter()``; they are not
      meant to be mutated concurrently
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from urllib.parse import urlencode

from ..runtime.pagination import CallIterator, JSONTransport, MessageIterator, PageIterator
from ..utils.dates import format_ymd

ListQueryConf = Callable[["ListQuery"], None]

DateLike = str | date | datetime


def from_number(phone_number: str) -> ListQueryConf:
    """Filter calls and messages sent from a phone number."""
    return lambda q: q.set("From", phone_number)


def to_number(phone_number: str) -> ListQueryConf:
    """Filter calls and messages sent to a phone number."""
    return lambda q: q.set("To", phone_number)


def started_before(day: DateLike) -> ListQueryConf:
    """Filter calls started before a day (only year, month and day count)."""
    ymd = format_ymd(day)
    return lambda q: q.set("StartTime<", ymd)


def started_after(day: DateLike) -> ListQueryConf:
    """Filter calls started after a day (only year, month and day count)."""
    ymd = format_ymd(day)
    return lambda q: q.set("StartTime>", ymd)


def sent_before(day: DateLike) -> ListQueryConf:
    """Filter messages sent before a day (only year, month and day count)."""
    ymd = format_ymd(day)
    return lambda q: q.set("DateSent<", ymd)


def sent_after(day: DateLike) -> ListQueryConf:
    """Filter messages sent after a day (only year, month and day count)."""
    ymd = format_ymd(day)
    return lambda q: q.set("DateSent>", ymd)


class ListQuery:
    """Filters for one list endpoint, bound to a transport."""

    iterator_type: type[PageIterator]

    def __init__(self, transport: JSONTransport, path: str, *confs: ListQueryConf) -> None:
        self.values: dict[str, str] = {}
        self._transport = transport
        self._path = path
        self.apply(*confs)

    def set(self, key: str, value: str) -> ListQuery:
        """Set a filter, replacing any earlier value for the key."""
        self.values[key] = value
        return self

    def apply(self, *confs: ListQueryConf) -> ListQuery:
        for conf in confs:
            conf(self)
        return self

    def from_number(self, phone_number: str) -> ListQuery:
        return self.apply(from_number(phone_number))

    def to_number(self, phone_number: str) -> ListQuery:
        return self.apply(to_number(phone_number))

    def encode(self) -> str:
        """URL-encode the filters, keys sorted."""
        return urlencode(sorted(self.values.items()))

    def uri(self) -> str:
        """Starting URI: the list endpoint plus encoded filters."""
        query = self.encode()
        return f"{self._path}?{query}" if query else self._path

    def iter(self) -> PageIterator:
        """Create a lazy iterator over the filtered listing.

        Nothing is fetched until the iterator's first pull. Each call
        returns a new, independent iterator.
        """
        return self.iterator_type(self._transport, self.uri())


class CallListQuery(ListQuery):
    """List query whose iterator yields Call items."""

    iterator_type = CallIterator

    def started_before(self, day: DateLike) -> CallListQuery:
        return self.apply(started_before(day))

    def started_after(self, day: DateLike) -> CallListQuery:
        return self.apply(started_after(day))


class MessageListQuery(ListQuery):
    """List query whose iterator yields Message items."""

    iterator_type = MessageIterator

    def sent_before(self, day: DateLike) -> MessageListQuery:
        return self.apply(sent_before(day))

    def sent_after(self, day: DateLike) -> MessageListQuery:
        return self.apply(sent_after(day))
