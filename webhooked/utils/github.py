"""Contains utility functions for GitHub interactions."""

from typing import Callable, Iterator, TypeVar
from urllib.parse import parse_qs, urlparse

import structlog

from webhooked.utils.constants import LINK_HEADER_PART_PATTERN

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[int], tuple[list[T], int | None]]


def next_page_from_link_header(link_header: str | None) -> int | None:
    """Return the page number of the rel="next" link in a GitHub Link header, or None on the last page."""
    if not link_header:
        return None
    for url, rel in LINK_HEADER_PART_PATTERN.findall(link_header):
        if rel != "next":
            continue
        page = parse_qs(urlparse(url).query).get("page")
        if page and page[0].isdigit():
            return int(page[0])
    return None


def crawl_pages(fetch_page: PageFetcher[T], start_page: int = 1) -> Iterator[list[T]]:
    """Repeatedly invoke a page fetcher, yielding each page of items until no next page is reported.

    The fetcher returns the items on the requested page along with the next page
    number, or None for the last page. Items are not accumulated here; any error
    raised by the fetcher stops pagination and propagates to the caller.
    """
    page: int | None = start_page
    while page is not None:
        items, next_page = fetch_page(page)
        logger.debug("Fetched page", page=page, item_count=len(items), next_page=next_page)
        yield items
        page = next_page
