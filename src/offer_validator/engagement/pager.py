"""Cursor pagination over engagement index listings."""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from offer_validator.models.records import Page

log = logging.getLogger(__name__)

PageFetcher = Callable[[str | None], Awaitable[Page]]


async def paginate(
    fetch_page: PageFetcher,
    max_pages: int = 0,
    label: str = "listing",
) -> AsyncIterator[dict[str, Any]]:
    """Yield every item of a cursor-paginated listing, one page at a time.

    Stops when the next cursor is empty or absent. ``max_pages`` > 0 caps
    the number of pages fetched; hitting the cap ends the scan as if the
    listing were exhausted.
    """
    cursor: str | None = None
    pages = 0
    while True:
        page = await fetch_page(cursor)
        pages += 1
        for item in page.items:
            yield item

        if not page.next_cursor:
            log.debug("%s exhausted after %d page(s)", label, pages)
            return
        if page.next_cursor == cursor:
            log.warning("%s returned a repeated cursor, stopping scan", label)
            return
        if max_pages and pages >= max_pages:
            log.warning("%s scan hit page cap (%d), stopping", label, max_pages)
            return
        cursor = page.next_cursor
