"""Reconcile webhooked configuration from CLI arguments and environment variables."""

from datetime import timedelta

import structlog

from webhooked.configuration.exceptions import InvalidConfigurationError, RequiredConfigurationElementError
from webhooked.configuration.models import DesiredHookModel, HookContentType, WebhookedConfig
from webhooked.utils.constants import ALL_EVENTS, DEFAULT_GITHUB_API_URL, MIN_MONITOR_INTERVAL
from webhooked.utils.helpers import parse_duration, split_events

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def validate_required_configuration(github_pat_token: str | None, url: str | None) -> tuple[str, str]:
    """Validates that the configuration elements without defaults were provided.

    Raises:
        RequiredConfigurationElementError: For the first missing element.

    Returns:
        tuple[str, str]: The access token and the webhook URL.
    """
    if not github_pat_token:
        raise RequiredConfigurationElementError("GitHub access token", "--token", "TOKEN")
    if not url:
        raise RequiredConfigurationElementError("webhook URL", "--url", "URL")
    return github_pat_token, url


def reconcile_content_type(content_type: str | HookContentType) -> HookContentType:
    """Resolves the content type into the enum GitHub accepts."""
    try:
        return HookContentType(content_type)
    except ValueError as exc:
        allowed = ", ".join(f"'{member.value}'" for member in HookContentType)
        raise InvalidConfigurationError(f"Invalid content type '{content_type}' - must be one of {allowed}") from exc


def reconcile_events(events: str | None) -> tuple[str, ...]:
    """Splits the comma-separated event list into a set in first-seen order, falling back to all events."""
    event_list = list(dict.fromkeys(split_events(events or "")))
    if not event_list:
        return (ALL_EVENTS,)
    if ALL_EVENTS in event_list and len(event_list) > 1:
        # GitHub is sent the list verbatim and hooks are compared literally,
        # so mixing the wildcard with named events keeps them all.
        logger.warning("Wildcard event combined with explicit events", events=event_list)
    return tuple(event_list)


def reconcile_monitor_interval(monitor: str | timedelta | None) -> timedelta | None:
    """Resolves the monitor interval, returning None when only a single sweep should run."""
    if monitor is None or monitor == "":
        return None
    if isinstance(monitor, timedelta):
        interval = monitor
    else:
        try:
            interval = parse_duration(monitor)
        except ValueError as exc:
            raise InvalidConfigurationError(f"Invalid monitor interval '{monitor}': {exc}") from exc
    if interval < MIN_MONITOR_INTERVAL:
        logger.debug("Monitor interval below minimum, running a single sweep", monitor_interval=str(interval))
        return None
    return interval


def reconcile_webhooked_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str = DEFAULT_GITHUB_API_URL,
    cli_github_pat_token: str | None = None,
    cli_owner: str | None = None,
    cli_url: str | None = None,
    cli_content_type: str | HookContentType = HookContentType.JSON,
    cli_secret: str | None = None,
    cli_events: str | None = ALL_EVENTS,
    cli_monitor: str | timedelta | None = None,
) -> WebhookedConfig:
    """Reconciles the raw CLI values into a complete, immutable configuration.

    Args:
        cli_debug (bool): Whether debug logging is enabled.
        cli_github_api_url (str): The GitHub REST API base URL.
        cli_github_pat_token (str | None): The GitHub access token.
        cli_owner (str | None): The account whose repositories are scanned, or empty for the authenticated user.
        cli_url (str | None): The webhook target URL.
        cli_content_type (str | HookContentType): The media type the webhook should deliver.
        cli_secret (str | None): The webhook secret.
        cli_events (str | None): Comma-separated event names, or '*' for all events.
        cli_monitor (str | timedelta | None): Interval between sweeps in monitor mode.

    Raises:
        RequiredConfigurationElementError: If the token or URL is missing.
        InvalidConfigurationError: If the content type or monitor interval is malformed.

    Returns:
        WebhookedConfig: The reconciled configuration.
    """
    github_pat_token, url = validate_required_configuration(cli_github_pat_token, cli_url)

    hook = DesiredHookModel(
        url=url,
        content_type=reconcile_content_type(cli_content_type),
        secret=cli_secret or "",
        events=reconcile_events(cli_events),
    )
    return WebhookedConfig(
        debug=cli_debug,
        github_api_url=cli_github_api_url or DEFAULT_GITHUB_API_URL,
        github_pat_token=github_pat_token,
        owner=cli_owner or None,
        hook=hook,
        monitor_interval=reconcile_monitor_interval(cli_monitor),
    )
