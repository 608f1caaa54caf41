"""Pagination metadata shared by every list response."""

from __future__ import annotations

from .base import APIModel


class PageMeta(APIModel):
    """Navigation block of a paginated list response.

    Field names match the payload verbatim. ``next_page_uri`` and
    ``previous_page_uri`` are relative URIs, or null at either end of the
    listing.
    """

    page: int = 0
    page_size: int = 0
    num_pages: int | None = None

    start: int = 0
    end: int = 0
    total: int | None = None

    uri: str | None = None
    first_page_uri: str | None = None
    last_page_uri: str | None = None
    previous_page_uri: str | None = None
    next_page_uri: str | None = None

    def has_next_page(self) -> bool:
        return bool(self.next_page_uri)

    def has_previous_page(self) -> bool:
        return bool(self.previous_page_uri)
