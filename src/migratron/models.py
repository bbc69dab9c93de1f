"""Data models exchanged between the hosting gateway and the migration workflow.

These models are plain snapshots of the remote state. The workflow reads
source issues and comments, builds an IssueMigrationRequest, and hands it to
the gateway for creation. Nothing here talks to the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class RepoRef:
    """An (owner, name) pair identifying a repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, repo_path: str, *, source: str = "repository") -> RepoRef:
        """Parse an ``owner/name`` string.

        Args:
            repo_path: Repository path, surrounding whitespace is ignored
            source: Name of the setting the value came from, used in error messages

        Raises:
            ConfigurationError: If the value is not exactly two non-empty parts
        """
        parts = repo_path.strip().split("/")
        if len(parts) != 2:  # noqa: PLR2004
            msg = f"{source} is not in org/repo format: {repo_path!r}. Expected format: 'owner/repository'"
            raise ConfigurationError(msg)
        owner, name = parts
        if not owner or not name:
            msg = f"{source} is not in org/repo format: {repo_path!r}. Both owner and repository name must be non-empty"
            raise ConfigurationError(msg)
        return cls(owner=owner, name=name)

    def __str__(self) -> str:
        return self.full_name


@dataclass
class Issue:
    """An issue as read from the hosting platform.

    Pull requests share the issue numbering space and are returned by the
    same endpoints; is_pull_request tells them apart.
    """

    number: int
    title: str
    body: str
    state: Literal["open", "closed"]
    html_url: str
    author: str = ""
    labels: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    is_pull_request: bool = False

    def has_label(self, name: str) -> bool:
        return name in self.labels


@dataclass
class Comment:
    """A comment on an issue."""

    body: str
    author: str = ""
    created_at: datetime | None = None


@dataclass
class IssueMigrationRequest:
    """Payload for the destination issue, assembled interactively.

    labels is None when the operator declined to sync labels, in which case
    no labels are sent with the create call.
    """

    title: str
    body: str
    labels: list[str] | None = None
