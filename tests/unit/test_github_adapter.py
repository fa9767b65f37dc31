"""Unit tests for the PyGithubAdapter class and related GitHub operations."""

from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, call

import pytest
from github import GithubException
from github.Hook import Hook

from webhooked.configuration.models import DesiredHookModel, HookContentType
from webhooked.github.adapter import PyGithubAdapter, is_archived
from webhooked.github.models import RepositoryReference


def make_repository(name: str, owner: str = "octocat", archived: bool | None = False) -> dict[str, Any]:
    """Create raw repository data as returned by a GitHub listing."""
    repository: dict[str, Any] = {"owner": {"login": owner}, "name": name, "full_name": f"{owner}/{name}"}
    if archived is not None:
        repository["archived"] = archived
    return repository


def make_page(items: list, next_page: int | None = None) -> tuple[dict[str, str], list]:
    """Create a (headers, data) response, with a Link header when another page follows."""
    headers: dict[str, str] = {}
    if next_page is not None:
        headers["link"] = (
            f'<https://api.github.com/user/repos?per_page=2&page={next_page}>; rel="next", '
            '<https://api.github.com/user/repos?per_page=2&page=9>; rel="last"'
        )
    return headers, items


def page_call(url: str, page: int, **parameters: Any) -> Any:
    """Expected request for one page of a listing."""
    return call("GET", url, parameters={**parameters, "per_page": 2, "page": page})


@pytest.fixture
def adapter() -> PyGithubAdapter:
    """Adapter over a mocked PyGithub client with a small page size."""
    client = MagicMock()
    client.create_from_raw_data.side_effect = lambda klass, raw_data, headers: SimpleNamespace(**raw_data)
    return PyGithubAdapter(client, per_page=2)


@pytest.mark.parametrize(
    "archived,expected",
    [
        pytest.param(True, True, id="archived"),
        pytest.param(False, False, id="not archived"),
        pytest.param(None, False, id="flag missing"),
    ],
)
def test_is_archived(archived: bool | None, expected: bool) -> None:
    """Test that only an explicit archived flag excludes a repository."""
    assert is_archived(make_repository("repo", archived=archived)) is expected


def test_list_repositories_for_authenticated_user(adapter: PyGithubAdapter) -> None:
    """Test that an empty owner lists the authenticated user's repositories across pages."""
    request = adapter.client.requester.requestJsonAndCheck
    request.side_effect = [
        make_page([make_repository("a"), make_repository("b")], next_page=2),
        make_page([make_repository("c")]),
    ]

    repositories = adapter.list_repositories(None)

    assert request.call_args_list == [page_call("/user/repos", 1, type="owner"), page_call("/user/repos", 2, type="owner")]
    assert repositories == [
        RepositoryReference("octocat", "a"),
        RepositoryReference("octocat", "b"),
        RepositoryReference("octocat", "c"),
    ]


def test_list_repositories_for_named_owner(adapter: PyGithubAdapter) -> None:
    """Test that a named owner lists that account's repositories."""
    request = adapter.client.requester.requestJsonAndCheck
    request.return_value = make_page([make_repository("tools", owner="acme")])

    repositories = adapter.list_repositories("acme")

    request.assert_called_once_with("GET", "/users/acme/repos", parameters={"type": "owner", "per_page": 2, "page": 1})
    assert repositories == [RepositoryReference("acme", "tools")]


def test_list_repositories_skips_archived(adapter: PyGithubAdapter) -> None:
    """Test that archived repositories are excluded even when GitHub returns them."""
    adapter.client.requester.requestJsonAndCheck.side_effect = [
        make_page([make_repository("live"), make_repository("old", archived=True)], next_page=2),
        make_page([make_repository("unknown", archived=None)]),
    ]

    repositories = adapter.list_repositories()

    assert [repository.name for repository in repositories] == ["live", "unknown"]


def test_list_repositories_propagates_first_page_error(adapter: PyGithubAdapter) -> None:
    """Test that a failure on the first page stops the listing."""
    request = adapter.client.requester.requestJsonAndCheck
    request.side_effect = GithubException(500, {"message": "Server Error"}, None)

    with pytest.raises(GithubException):
        adapter.list_repositories()
    request.assert_called_once()


def test_list_hooks_collects_every_page(adapter: PyGithubAdapter) -> None:
    """Test that hooks from every page are returned unfiltered, in order."""
    request = adapter.client.requester.requestJsonAndCheck
    request.side_effect = [make_page([{"id": 0}, {"id": 1}], next_page=2), make_page([{"id": 2}])]

    result = adapter.list_hooks(RepositoryReference("octocat", "hello"))

    assert request.call_args_list == [page_call("/repos/octocat/hello/hooks", 1), page_call("/repos/octocat/hello/hooks", 2)]
    assert [hook.id for hook in result] == [0, 1, 2]
    assert adapter.client.create_from_raw_data.call_args_list[0].args[:2] == (Hook, {"id": 0})


def test_list_hooks_full_last_page_is_fetched_once(adapter: PyGithubAdapter) -> None:
    """Test that a page filling the page size without a next link ends the listing."""
    request = adapter.client.requester.requestJsonAndCheck
    request.side_effect = [make_page([{"id": 1}, {"id": 2}])]

    result = adapter.list_hooks(RepositoryReference("octocat", "hello"))

    assert request.call_count == 1
    assert [hook.id for hook in result] == [1, 2]


def test_list_hooks_short_page_with_next_link_continues(adapter: PyGithubAdapter) -> None:
    """Test that a short page still followed by a next link does not end the listing."""
    request = adapter.client.requester.requestJsonAndCheck
    request.side_effect = [make_page([{"id": 1}], next_page=2), make_page([{"id": 2}])]

    result = adapter.list_hooks(RepositoryReference("octocat", "hello"))

    assert [hook.id for hook in result] == [1, 2]


def test_create_hook_sends_full_configuration(adapter: PyGithubAdapter, desired_hook: DesiredHookModel) -> None:
    """Test that creating a hook sends the URL, content type, secret and events."""
    repository = adapter.client.get_repo.return_value
    repository.create_hook.return_value = SimpleNamespace(id=99)

    created = adapter.create_hook(RepositoryReference("octocat", "hello"), desired_hook)

    adapter.client.get_repo.assert_called_once_with("octocat/hello", lazy=True)
    assert created.id == 99
    repository.create_hook.assert_called_once_with(
        name="web",
        config={
            "url": "https://hooks.example.com/github",
            "content_type": "json",
            "secret": "s3cret",
            "insecure_ssl": "0",
        },
        events=["push", "pull_request"],
        active=True,
    )


def test_update_hook_patches_by_id_in_one_request(adapter: PyGithubAdapter) -> None:
    """Test that updating a hook overwrites it by id with the full desired configuration."""
    desired = DesiredHookModel(url="https://hooks.example.com/github", content_type=HookContentType.FORM, events=("*",))
    request = adapter.client.requester.requestJsonAndCheck
    request.return_value = ({}, {"id": 42})

    updated = adapter.update_hook(RepositoryReference("octocat", "hello"), 42, desired)

    request.assert_called_once_with(
        "PATCH",
        "/repos/octocat/hello/hooks/42",
        input={
            "name": "web",
            "config": {
                "url": "https://hooks.example.com/github",
                "content_type": "form",
                "secret": "",
                "insecure_ssl": "0",
            },
            "events": ["*"],
            "active": True,
        },
    )
    adapter.client.get_repo.assert_not_called()
    assert updated.id == 42


def test_create_hook_422_raises_value_error(adapter: PyGithubAdapter, desired_hook: DesiredHookModel) -> None:
    """Test that a 422 from GitHub is re-raised as a ValueError with the error details."""
    adapter.client.get_repo.return_value.create_hook.side_effect = GithubException(
        422, {"message": "Validation Failed", "errors": [{"message": "Hook already exists on this repository"}]}, None
    )

    with pytest.raises(ValueError, match="Validation Failed") as exc_info:
        adapter.create_hook(RepositoryReference("octocat", "hello"), desired_hook)
    assert "Hook already exists" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, GithubException)


def test_update_hook_other_errors_propagate(adapter: PyGithubAdapter, desired_hook: DesiredHookModel) -> None:
    """Test that non-422 errors are raised unchanged."""
    adapter.client.requester.requestJsonAndCheck.side_effect = GithubException(404, {"message": "Not Found"}, None)

    with pytest.raises(GithubException):
        adapter.update_hook(RepositoryReference("octocat", "hello"), 42, desired_hook)
