"""Protocols defining the contracts the migration workflow depends on.

The workflow is split from its side effects so it can be exercised without a
network or a terminal:

1. IssueHost: reads and writes issues, comments, labels and users on the
   hosting platform
2. Prompter: asks the operator for decisions and replacement text (see
   prompts.py)

The Migrator in orchestrator.py only talks to these protocols.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Comment, Issue, IssueMigrationRequest, RepoRef


class IssueHost(Protocol):
    """Protocol for the hosting platform holding both repositories.

    Implementations wrap a platform client and return normalized models.
    Errors from the platform are raised as MigrationError; there is no retry.

    The Migrator calls the write methods in a fixed order for each issue:
    1. create_issue() - Create the destination issue
    2. get_issue() - Re-fetch it for its canonical URL
    3. get_user() - Resolve the operator's identity
    4. create_comment() - Leave the provenance comment on the source issue
    5. add_labels() - Mark the source issue as migrated

    Example implementations:
        - GitHubIssueHost: Uses PyGithub for the REST API
    """

    def list_issues(self, repo: RepoRef) -> Iterator[Issue]:
        """Yield open issues (including pull requests) newest first."""
        ...

    def get_issue(self, repo: RepoRef, number: int) -> Issue:
        """Get a single issue by number."""
        ...

    def create_issue(self, repo: RepoRef, request: IssueMigrationRequest) -> Issue:
        """Create an issue from the request and return it."""
        ...

    def list_comments(self, repo: RepoRef, number: int) -> list[Comment]:
        """Return all comments of an issue in chronological order."""
        ...

    def create_comment(self, repo: RepoRef, number: int, body: str) -> None:
        """Add a comment to an issue."""
        ...

    def add_labels(self, repo: RepoRef, number: int, labels: list[str]) -> None:
        """Add labels to an issue, keeping its existing ones."""
        ...

    def get_user(self, login: str) -> str:
        """Look up a user and return the canonical login.

        Raises:
            MigrationError: If the user does not exist
        """
        ...
