"""Contains unit tests for the GitHub client setup and references."""

from unittest.mock import patch

import pytest

from webhooked.github.client import get_github_pat_client
from webhooked.github.models import RepositoryReference


def test_get_github_pat_client_requires_token() -> None:
    """Test that an empty token is rejected before any client is built."""
    with pytest.raises(RuntimeError):
        get_github_pat_client("")


def test_get_github_pat_client_uses_base_url() -> None:
    """Test that the client is built with the token, base URL and page size."""
    with patch("webhooked.github.client.Github") as mock_github, patch("webhooked.github.client.Auth.Token") as mock_token:
        client = get_github_pat_client("token", "https://ghe.example.com/api/v3", per_page=25)

    mock_token.assert_called_once_with("token")
    mock_github.assert_called_once_with(auth=mock_token.return_value, base_url="https://ghe.example.com/api/v3", per_page=25)
    assert client is mock_github.return_value


def test_repository_reference_full_name() -> None:
    """Test that references render as owner/name."""
    repository = RepositoryReference("octocat", "hello-world")
    assert repository.full_name == "octocat/hello-world"
    assert str(repository) == "octocat/hello-world"
