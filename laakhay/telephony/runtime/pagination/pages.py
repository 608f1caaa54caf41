"""Page adapters for paginated list resources.

Each concrete page wraps one decoded list response and exposes the same
small capability set, so ``PageIterator`` never needs to know which
resource it is walking:

- ``item_at(index)``: item at an offset within this page
- ``size()``: number of items on this page
- ``has_next_page()``: whether the server supplied a next-page link
- ``fetch_next_page(transport)``: load the linked page as a new instance

Supporting another list resource only requires another subclass naming its
item model and the payload key holding the items.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar, Protocol

from pydantic import Field, ValidationError

from ...core.exceptions import DecodeError
from ...models import APIModel, Call, Message, PageMeta


class JSONTransport(Protocol):
    """What pages need from a transport."""

    async def get_json(self, uri: str, params: dict[str, Any] | None = None) -> Any: ...


class ResourcePage(PageMeta, ABC):
    """One page of a list resource plus its navigation metadata."""

    item_type: ClassVar[type[APIModel]]

    @property
    @abstractmethod
    def items(self) -> Sequence[APIModel]:
        """Items on this page, in server order."""

    @classmethod
    async def load(cls, transport: JSONTransport, uri: str) -> ResourcePage:
        """Fetch ``uri`` and decode it as this page type.

        Raises:
            DecodeError: If the payload does not match the page shape
            APIError: If the API rejected the request
            TransportError: If the request failed
        """
        data = await transport.get_json(uri)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid {cls.__name__} payload from {uri}: {e.error_count()} error(s)",
                url=uri,
            ) from e

    def item_at(self, index: int) -> APIModel:
        if not 0 <= index < self.size():
            raise IndexError(f"{type(self).__name__} index {index} out of range [0, {self.size()})")
        return self.items[index]

    def size(self) -> int:
        return len(self.items)

    async def fetch_next_page(self, transport: JSONTransport) -> ResourcePage:
        """Load the page linked by ``next_page_uri`` as the same page type.

        The link is used verbatim; the transport resolves it against the
        API host it was configured with.
        """
        if not self.has_next_page():
            raise RuntimeError(f"{type(self).__name__} has no next page")
        return await type(self).load(transport, self.next_page_uri)


class CallPage(ResourcePage):
    item_type: ClassVar[type[APIModel]] = Call

    calls: list[Call] = Field(default_factory=list)

    @property
    def items(self) -> list[Call]:
        return self.calls


class MessagePage(ResourcePage):
    item_type: ClassVar[type[APIModel]] = Message

    messages: list[Message] = Field(default_factory=list)

    @property
    def items(self) -> list[Message]:
        return self.messages
