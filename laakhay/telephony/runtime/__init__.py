"""Runtime layer: REST transport and pagination."""

from .pagination import (
    CallIterator,
    CallPage,
    MessageIterator,
    MessagePage,
    PageIterator,
    ResourcePage,
)
from .rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "CallIterator",
    "CallPage",
    "MessageIterator",
    "MessagePage",
    "PageIterator",
    "ResourcePage",
    "RESTTransport",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
