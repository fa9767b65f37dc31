"""Contains matching logic for GitHub repository webhooks."""

from typing import Any, Sequence

import structlog

from webhooked.configuration.models import DesiredHookModel, HookContentType
from webhooked.synchronize.models import SyncDecision
from webhooked.synchronize.types import HookLike

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def hook_config_value(hook: HookLike, field: str) -> str | None:
    """Read a string field from a hook's config, treating unset values as None."""
    value: Any = (hook.config or {}).get(field)
    return value if isinstance(value, str) else None


def hook_content_type(hook: HookLike) -> str:
    """Content type a hook delivers; GitHub defaults to form when none is reported."""
    return hook_config_value(hook, "content_type") or HookContentType.FORM.value


def find_hook(hooks: Sequence[HookLike], url: str) -> HookLike | None:
    """Return the first hook whose URL exactly equals the given URL, or None."""
    for hook in hooks:
        if hook_config_value(hook, "url") == url:
            return hook
    return None


def hook_events_match(installed_events: Sequence[str], desired_events: Sequence[str]) -> bool:
    """Compare event lists ignoring order.

    The lists match when they have the same length and every installed event
    appears in the desired list. Events are compared literally, so a wildcard
    only matches a wildcard.
    """
    if len(installed_events) != len(desired_events):
        return False
    return all(event in desired_events for event in installed_events)


def hook_is_valid(hook: HookLike, desired: DesiredHookModel) -> bool:
    """Whether an installed hook already matches the desired configuration.

    The URL is assumed to match already and GitHub never returns the secret,
    so only the content type and the events are compared.
    """
    if hook_content_type(hook) != desired.content_type.value:
        return False
    return hook_events_match(list(hook.events or []), desired.events)


def decide_hook_sync_action(desired: DesiredHookModel, github_hook: HookLike | None = None) -> SyncDecision:
    """Compare the desired hook and a GitHub hook, and decide whether to create, update, or no-op.

    Key is hook URL.
    """
    if github_hook is None:
        logger.info("Hook not found in GitHub", hook_url=desired.url)
        return SyncDecision.CREATE

    if not hook_is_valid(github_hook, desired):
        logger.info(
            "Hook needs to be updated",
            hook_id=github_hook.id,
            current_content_type=hook_content_type(github_hook),
            new_content_type=desired.content_type.value,
            current_events=sorted(github_hook.events or []),
            new_events=sorted(desired.events),
        )
        return SyncDecision.UPDATE

    logger.debug("Hook is up to date", hook_id=github_hook.id)
    return SyncDecision.NOOP
