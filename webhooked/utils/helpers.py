"""General utility functions and helper classes."""

import re
from datetime import timedelta

from webhooked.utils.constants import DURATION_PART_PATTERN, DURATION_PATTERN

DURATION_UNITS: dict[str, timedelta] = {
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
    "ms": timedelta(milliseconds=1),
    "us": timedelta(microseconds=1),
    "µs": timedelta(microseconds=1),
    "ns": timedelta(microseconds=1) / 1000,
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration like '90s', '5m' or '1h30m' into a timedelta.

    A bare number is interpreted as seconds. A leading sign is accepted, so
    negative durations parse to a negative timedelta.

    Raises:
        ValueError: If the value is not a valid duration.
    """
    text = value.strip()
    sign = -1 if text.startswith("-") else 1
    if text.startswith(("-", "+")):
        text = text[1:]
    if re.fullmatch(r"\d+(?:\.\d+)?", text):
        return sign * timedelta(seconds=float(text))
    if not DURATION_PATTERN.fullmatch(text):
        raise ValueError(f"invalid duration '{value}'")
    total = timedelta()
    for number, unit in DURATION_PART_PATTERN.findall(text):
        total += DURATION_UNITS[unit] * float(number)
    return sign * total


def split_events(events: str) -> list[str]:
    """Split a comma-separated event list, dropping blank entries."""
    return [event.strip() for event in events.split(",") if event.strip()]
