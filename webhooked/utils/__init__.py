"""Utility modules for shared functionality."""

from .constants import (
    ALL_EVENTS,
    DEFAULT_GITHUB_API_URL,
    HOOK_NAME,
    MIN_MONITOR_INTERVAL,
    PER_PAGE,
)
from .github import crawl_pages, next_page_from_link_header
from .helpers import parse_duration, split_events

__all__ = [
    "ALL_EVENTS",
    "DEFAULT_GITHUB_API_URL",
    "HOOK_NAME",
    "MIN_MONITOR_INTERVAL",
    "PER_PAGE",
    "crawl_pages",
    "next_page_from_link_header",
    "parse_duration",
    "split_events",
]
