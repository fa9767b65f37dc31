# This file is intended to hold the setup for the authenticated PyGithub client.

"""Sets up the authenticated PyGithub client."""

from github import Auth, Github

from webhooked.utils.constants import DEFAULT_GITHUB_API_URL, PER_PAGE


def get_github_pat_client(github_pat_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL, per_page: int = PER_PAGE) -> Github:
    """Returns an authenticated GitHub client using a bearer access token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is provided.
    """
    if not github_pat_token:
        raise RuntimeError("GitHub authentication requires an access token.")
    return Github(auth=Auth.Token(github_pat_token), base_url=github_api_url, per_page=per_page)
