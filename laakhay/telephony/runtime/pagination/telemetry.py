"""Structured logging for paginated iteration.

This module provides telemetry hooks for page loads, emitting structured
logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    resource: str,
    uri: str,
    page: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully decoded page.

    Args:
        resource: Page type name (e.g. "CallPage")
        uri: URI the page was fetched from
        page: Server page number
        items: Number of items on the page
        has_next: Whether the page links to a next page
        latency_ms: Fetch and decode latency in milliseconds
    """
    logger.debug(
        "page_fetched",
        extra={
            "resource": resource,
            "uri": uri,
            "page": page,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    resource: str,
    uri: str | None,
    error_type: str,
    error_message: str,
    items_yielded: int,
) -> None:
    """Log a page load failure that closed an iterator."""
    logger.warning(
        "page_fetch_failed",
        extra={
            "resource": resource,
            "uri": uri,
            "error_type": error_type,
            "error_message": error_message,
            "items_yielded": items_yielded,
        },
    )


def log_iteration_complete(*, resource: str, pages_fetched: int, items_yielded: int) -> None:
    """Log normal exhaustion of an iterator."""
    logger.info(
        "iteration_complete",
        extra={
            "resource": resource,
            "pages_fetched": pages_fetched,
            "items_yielded": items_yielded,
        },
    )
