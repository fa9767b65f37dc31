"""Internal data models for synchronization decisions."""

from enum import Enum


class SyncDecision(Enum):
    """Enum for sync decisions."""

    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


class ReconcilePhase(str, Enum):
    """Step of a sweep that was running when an error occurred."""

    LIST_REPOSITORIES = "list_repositories"
    LIST_HOOKS = "list_hooks"
    INSTALL = "install"
    UPDATE = "update"
