"""Orchestrates the synchronization of GitHub webhooks."""

import time

import structlog

from webhooked.configuration.models import DesiredHookModel, WebhookedConfig
from webhooked.github.abc import GitHubClientBase
from webhooked.github.adapter import PyGithubAdapter
from webhooked.synchronize.exceptions import HookReconciliationError
from webhooked.synchronize.hooks import decide_hook_sync_action, find_hook
from webhooked.synchronize.models import ReconcilePhase, SyncDecision
from webhooked.synchronize.results import HookSynchronizationResult, SweepResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def reconcile_repository_hooks(github_adapter: GitHubClientBase, desired: DesiredHookModel, owner: str | None = None) -> SweepResult:
    """Ensure every repository owned by the account has the desired webhook.

    Repositories are processed one at a time in listing order. The first failure
    aborts the sweep with a HookReconciliationError naming the repository and the
    phase that failed.
    """
    try:
        repositories = github_adapter.list_repositories(owner)
    except Exception as exc:
        raise HookReconciliationError(ReconcilePhase.LIST_REPOSITORIES, reason=str(exc)) from exc

    sweep_result = SweepResult()
    for repository in repositories:
        try:
            hooks = github_adapter.list_hooks(repository)
        except Exception as exc:
            raise HookReconciliationError(ReconcilePhase.LIST_HOOKS, repository, str(exc)) from exc

        github_hook = find_hook(hooks, desired.url)
        decision = decide_hook_sync_action(desired, github_hook)
        hook_id = github_hook.id if github_hook is not None else None

        if decision == SyncDecision.CREATE:
            try:
                created_hook = github_adapter.create_hook(repository, desired)
            except Exception as exc:
                raise HookReconciliationError(ReconcilePhase.INSTALL, repository, str(exc)) from exc
            hook_id = getattr(created_hook, "id", None)
            logger.info("Installed hook", repository=repository.full_name, hook_id=hook_id)
        elif decision == SyncDecision.UPDATE and hook_id is not None:
            try:
                github_adapter.update_hook(repository, hook_id, desired)
            except Exception as exc:
                raise HookReconciliationError(ReconcilePhase.UPDATE, repository, str(exc)) from exc
            logger.info("Updated hook", repository=repository.full_name, hook_id=hook_id)
        else:
            logger.debug("Hook already up to date", repository=repository.full_name, hook_id=hook_id)

        sweep_result.results.append(HookSynchronizationResult(repository, decision, hook_id))
    return sweep_result


def run_reconcile_hooks_workflow(config: WebhookedConfig, github_adapter: GitHubClientBase | None = None) -> SweepResult:
    """Run a single sweep against GitHub using the given configuration."""
    if github_adapter is None:
        github_adapter = PyGithubAdapter.create(github_pat_token=config.github_pat_token, github_api_url=config.github_api_url)

    start_time = time.time()
    logger.info("Scanning repositories", owner=config.owner or "<authenticated user>", hook_url=config.hook.url)
    sweep_result = reconcile_repository_hooks(github_adapter, config.hook, config.owner)
    end_time = time.time()
    logger.info(
        "Scanned repositories",
        duration=round(end_time - start_time, 2),
        repository_count=len(sweep_result.results),
        installed=sweep_result.installed,
        updated=sweep_result.updated,
        unchanged=sweep_result.unchanged,
    )
    return sweep_result


def run_monitor_workflow(config: WebhookedConfig, github_adapter: GitHubClientBase | None = None) -> None:
    """Sweep repeatedly, sleeping for the monitor interval between sweeps.

    Never returns normally. A failed sweep propagates and ends monitoring.
    """
    if config.monitor_interval is None:
        raise ValueError("Monitor mode requires a monitor interval.")
    if github_adapter is None:
        github_adapter = PyGithubAdapter.create(github_pat_token=config.github_pat_token, github_api_url=config.github_api_url)

    interval_seconds = config.monitor_interval.total_seconds()
    logger.info("Monitoring mode", monitor_interval=str(config.monitor_interval))
    while True:
        run_reconcile_hooks_workflow(config, github_adapter)
        logger.debug("Sleeping until next sweep", seconds=interval_seconds)
        time.sleep(interval_seconds)
