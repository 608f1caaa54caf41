"""Public query-building API."""

from .query import (
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

__all__ = [
    "CallListQuery",
    "ListQuery",
    "ListQueryConf",
    "MessageListQuery",
    "from_number",
    "sent_after",
    "sent_before",
    "started_after",
    "started_before",
    "to_number",
]
