"""Laakhay Telephony - async client for calls, messages and number lookups."""

from .api import (
    CallListQuery,
    ListQuery,
    ListQueryConf,
    MessageListQuery,
    from_number,
    sent_after,
    sent_before,
    started_after,
    started_before,
    to_number,
)
from .clients import TelephonyClient
from .config import API_VERSION, BASE_URL, LOOKUP_URL, ClientConfig
from .core import (
    APIError,
    DecodeError,
    QueryError,
    TelephonyError,
    TransportError,
)
from .models import (
    Call,
    CallRequest,
    Carrier,
    Lookup,
    LookupRequest,
    Message,
    MessageRequest,
    PageMeta,
)
from .runtime import (
    CallIterator,
    CallPage,
    MessageIterator,
    MessagePage,
    PageIterator,
    ResourcePage,
    RESTTransport,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "TelephonyClient",
    "ClientConfig",
    "API_VERSION",
    "BASE_URL",
    "LOOKUP_URL",
    # Queries
    "CallListQuery",
    "ListQuery",
    "ListQueryConf",
    "MessageListQuery",
    "from_number",
    "to_number",
    "started_before",
    "started_after",
    "sent_before",
    "sent_after",
    # Iteration
    "PageIterator",
    "CallIterator",
    "MessageIterator",
    "ResourcePage",
    "CallPage",
    "MessagePage",
    "RESTTransport",
    # Models
    "Call",
    "CallRequest",
    "Carrier",
    "Lookup",
    "LookupRequest",
    "Message",
    "MessageRequest",
    "PageMeta",
    # Exceptions
    "TelephonyError",
    "APIError",
    "TransportError",
    "DecodeError",
    "QueryError",
]
