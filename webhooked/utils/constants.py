"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re
from datetime import timedelta

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL (override for GitHub Enterprise Server)."""

PER_PAGE = 50
"""Number of items requested per page from paginated GitHub endpoints."""

LINK_HEADER_PART_PATTERN = re.compile(r'<([^>]+)>\s*;\s*rel="([^"]+)"')
"""Pattern to match one URL and rel pair within a GitHub Link response header."""

# Webhook Constants
# -----------------

HOOK_NAME = "web"
"""Name GitHub requires for repository webhooks."""

ALL_EVENTS = "*"
"""Wildcard event subscribing a webhook to every event."""

INSECURE_SSL_DISABLED = "0"
"""Value of the insecure_ssl webhook setting that keeps SSL verification on."""

# Monitor Mode Constants
# ----------------------

MIN_MONITOR_INTERVAL = timedelta(minutes=1)
"""Shortest interval that enables monitor mode; anything lower runs a single sweep."""

DURATION_PATTERN = re.compile(r"(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ms|us|µs|ns|h|m|s))+")
"""Pattern to match a duration string such as 90s, 5m or 1h30m."""

DURATION_PART_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ms|us|µs|ns|h|m|s)")
"""Pattern to match one number and unit pair within a duration string."""
