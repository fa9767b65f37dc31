"""Lightweight references to GitHub objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryReference:
    """Identifies a repository by its owner login and name."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name
