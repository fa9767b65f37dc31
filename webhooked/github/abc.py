"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any

from webhooked.configuration.models import DesiredHookModel
from webhooked.github.models import RepositoryReference


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository listing
    @abstractmethod
    def list_repositories(self, owner: str | None = None) -> list[RepositoryReference]:
        """List non-archived repositories owned by an account, or by the authenticated user."""
        pass

    # Webhook CRUD
    @abstractmethod
    def list_hooks(self, repository: RepositoryReference) -> list[Any]:
        """List webhooks installed on a repository."""
        pass

    @abstractmethod
    def create_hook(self, repository: RepositoryReference, hook: DesiredHookModel) -> Any:
        """Create a webhook on a repository."""
        pass

    @abstractmethod
    def update_hook(self, repository: RepositoryReference, hook_id: int, hook: DesiredHookModel) -> Any:
        """Overwrite an existing webhook on a repository."""
        pass
