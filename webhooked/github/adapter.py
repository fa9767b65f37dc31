"""GitHub client adapter for the PyGithub library."""

from functools import wraps
from typing import Any, Callable, Iterator, Self, TypeVar

import structlog
from github import Github, GithubException
from github.Hook import Hook

from webhooked.configuration.models import DesiredHookModel
from webhooked.github.models import RepositoryReference
from webhooked.utils.constants import DEFAULT_GITHUB_API_URL, HOOK_NAME, INSECURE_SSL_DISABLED, PER_PAGE
from webhooked.utils.github import crawl_pages, next_page_from_link_header

from .abc import GitHubClientBase
from .client import get_github_pat_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GithubException as exc:
            if exc.status == 422:
                error_data = exc.data if isinstance(exc.data, dict) else {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


def is_archived(repository: dict[str, Any]) -> bool:
    """Whether GitHub reports the repository as archived; a missing flag counts as not archived."""
    return repository.get("archived") is True


class PyGithubAdapter(GitHubClientBase):
    """GitHub client adapter for the PyGithub library."""

    def __init__(self, client: Github, per_page: int = PER_PAGE) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.per_page = per_page

    @classmethod
    def create(cls, github_pat_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_pat_token: Access token sent as a bearer credential on every request
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured PyGithubAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = get_github_pat_client(github_pat_token=github_pat_token, github_api_url=github_api_url, per_page=PER_PAGE)
        return cls(client, per_page=PER_PAGE)

    def _hook_parameters(self, hook: DesiredHookModel) -> dict[str, Any]:
        """Build the request body shared by webhook creation and update."""
        return {
            "config": {
                "url": hook.url,
                "content_type": hook.content_type.value,
                "secret": hook.secret,
                "insecure_ssl": INSECURE_SSL_DISABLED,
            },
            "events": list(hook.events),
            "active": True,
        }

    def _crawl(self, url: str, **parameters: Any) -> Iterator[tuple[dict[str, Any], dict[str, Any]]]:
        """Fetch every page of a listing endpoint, one request per page.

        Yields each raw item together with the headers of the page it came from.
        """

        def fetch_page(page: int) -> tuple[list[tuple[dict[str, Any], dict[str, Any]]], int | None]:
            headers, data = self.client.requester.requestJsonAndCheck(
                "GET", url, parameters={**parameters, "per_page": self.per_page, "page": page}
            )
            return [(item, headers) for item in data or []], next_page_from_link_header(headers.get("link"))

        for items in crawl_pages(fetch_page):
            yield from items

    # Repository listing
    def list_repositories(self, owner: str | None = None) -> list[RepositoryReference]:
        """List all non-archived repositories owned by an account, handling pagination.

        An empty owner lists the repositories owned by the authenticated user.
        """
        url = f"/users/{owner}/repos" if owner else "/user/repos"
        repositories: list[RepositoryReference] = []
        for repository, _ in self._crawl(url, type="owner"):
            if is_archived(repository):
                logger.debug("Skipping archived repository", repository=repository.get("full_name"))
                continue
            repositories.append(RepositoryReference(owner=repository["owner"]["login"], name=repository["name"]))
        logger.info("Listed repositories", owner=owner or "<authenticated user>", repository_count=len(repositories))
        return repositories

    # Webhook CRUD
    def list_hooks(self, repository: RepositoryReference) -> list[Hook]:
        """List all webhooks for a repository, handling pagination."""
        return [self.client.create_from_raw_data(Hook, item, headers) for item, headers in self._crawl(f"/repos/{repository.full_name}/hooks")]

    @handle_github_422
    def create_hook(self, repository: RepositoryReference, hook: DesiredHookModel) -> Hook:
        """Create a webhook for a repository."""
        return self.client.get_repo(repository.full_name, lazy=True).create_hook(name=HOOK_NAME, **self._hook_parameters(hook))

    @handle_github_422
    def update_hook(self, repository: RepositoryReference, hook_id: int, hook: DesiredHookModel) -> Hook:
        """Overwrite a webhook by id with the full desired configuration in a single request."""
        headers, data = self.client.requester.requestJsonAndCheck(
            "PATCH", f"/repos/{repository.full_name}/hooks/{hook_id}", input={"name": HOOK_NAME, **self._hook_parameters(hook)}
        )
        return self.client.create_from_raw_data(Hook, data, headers)
