"""Data models for telephony API resources.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True); items handed out by iterators can
    be shared freely without copying.

Model Categories:
    - Resources: Call, Message, Lookup, Carrier
    - Requests: CallRequest, MessageRequest, LookupRequest
    - Pagination: PageMeta
"""

from .base import APIModel
from .call import Call, CallRequest, CallSubresourceURIs
from .lookup import Carrier, Lookup, LookupRequest
from .message import Message, MessageRequest, MessageSubresourceURIs
from .page import PageMeta

__all__ = [
    "APIModel",
    "Call",
    "CallRequest",
    "CallSubresourceURIs",
    "Carrier",
    "Lookup",
    "LookupRequest",
    "Message",
    "MessageRequest",
    "MessageSubresourceURIs",
    "PageMeta",
]
