"""Lazy pagination over list resources."""

from .iterator import CallIterator, MessageIterator, PageIterator
from .pages import CallPage, JSONTransport, MessagePage, ResourcePage

__all__ = [
    "CallIterator",
    "CallPage",
    "JSONTransport",
    "MessageIterator",
    "MessagePage",
    "PageIterator",
    "ResourcePage",
]
