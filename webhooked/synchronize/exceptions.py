"""Custom exceptions for the synchronize module."""

from webhooked.github.models import RepositoryReference
from webhooked.synchronize.models import ReconcilePhase

PHASE_DESCRIPTIONS: dict[ReconcilePhase, str] = {
    ReconcilePhase.LIST_REPOSITORIES: "list repositories",
    ReconcilePhase.LIST_HOOKS: "scan hooks",
    ReconcilePhase.INSTALL: "install hook",
    ReconcilePhase.UPDATE: "update hook",
}


class HookReconciliationError(Exception):
    """Raised when a sweep aborts because a GitHub call failed."""

    def __init__(self, phase: ReconcilePhase, repository: RepositoryReference | None = None, reason: str = "") -> None:
        """Initializes the exception with the phase and repository that failed."""
        message = f"Unable to {PHASE_DESCRIPTIONS[phase]}"
        if repository is not None:
            message += f" for {repository.full_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.phase = phase
        self.repository = repository
