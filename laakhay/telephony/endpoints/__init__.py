"""Telephony REST endpoint registry.

This module exports the endpoint specifications and adapters for the
single-request operations, plus the list paths used by list queries.
"""

from __future__ import annotations

from laakhay.telephony.runtime.rest import ResponseAdapter, RestEndpointSpec

from .calls import SPEC as CreateCallSpec  # noqa: N811
from .calls import Adapter as CreateCallAdapter
from .calls import build_path as build_calls_path
from .lookups import SPEC as LookupSpec  # noqa: N811
from .lookups import Adapter as LookupAdapter
from .messages import SPEC as CreateMessageSpec  # noqa: N811
from .messages import Adapter as CreateMessageAdapter
from .messages import build_path as build_messages_path

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "create_call": (CreateCallSpec, CreateCallAdapter),
    "create_message": (CreateMessageSpec, CreateMessageAdapter),
    "lookup": (LookupSpec, LookupAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "create_call", "lookup")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = [
    "build_calls_path",
    "build_messages_path",
    "get_endpoint_adapter",
    "get_endpoint_spec",
]
