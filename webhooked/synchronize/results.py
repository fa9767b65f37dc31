"""Contains results of application execution."""

from webhooked.github.models import RepositoryReference
from webhooked.synchronize.models import SyncDecision


class HookSynchronizationResult:
    """Contains the result of reconciling the webhook on one repository."""

    def __init__(self, repository: RepositoryReference, decision: SyncDecision, hook_id: int | None = None) -> None:
        """Initialize the result with the repository, the decision, and the hook acted upon."""
        self.repository = repository
        self.decision = decision
        self.hook_id = hook_id


class SweepResult:
    """Contains results of one sweep over every repository."""

    def __init__(self, results: list[HookSynchronizationResult] | None = None) -> None:
        """Initialize the sweep result with a list of per-repository results."""
        self.results = results or []

    def count(self, decision: SyncDecision) -> int:
        """Number of repositories that received the given decision."""
        return sum(1 for result in self.results if result.decision == decision)

    @property
    def installed(self) -> int:
        """Number of repositories that had the hook installed."""
        return self.count(SyncDecision.CREATE)

    @property
    def updated(self) -> int:
        """Number of repositories whose hook was overwritten."""
        return self.count(SyncDecision.UPDATE)

    @property
    def unchanged(self) -> int:
        """Number of repositories whose hook already matched."""
        return self.count(SyncDecision.NOOP)

    def summary(self) -> str:
        """One-line human readable summary of the sweep."""
        return f"{len(self.results)} repositories scanned: {self.installed} installed, {self.updated} updated, {self.unchanged} unchanged"
