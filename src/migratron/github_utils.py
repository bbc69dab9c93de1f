from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from github import Auth, Github, GithubException, UnknownObjectException

from .exceptions import MigrationError
from .models import Comment, Issue, IssueMigrationRequest, RepoRef

if TYPE_CHECKING:
    from collections.abc import Iterator

    import github.Issue
    import github.IssueComment
    from github.Repository import Repository

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

# GitHub caps page size at 100 whatever is requested
_PER_PAGE: Final[int] = 100


def get_client(token: str | None = None) -> Github:
    """Get a GitHub client using the token. Falls back to anonymous access without one."""
    if not token:
        return Github(per_page=_PER_PAGE)
    return Github(auth=Auth.Token(token), per_page=_PER_PAGE)


def to_issue(gh_issue: github.Issue.Issue) -> Issue:
    """Convert a PyGithub issue into a migratron Issue."""
    return Issue(
        number=gh_issue.number,
        title=gh_issue.title,
        body=gh_issue.body or "",
        state=gh_issue.state,  # pyright: ignore[reportArgumentType]
        html_url=gh_issue.html_url,
        author=gh_issue.user.login if gh_issue.user else "",
        labels=[label.name for label in gh_issue.labels],
        created_at=gh_issue.created_at,
        is_pull_request=gh_issue.pull_request is not None,
    )


def to_comment(gh_comment: github.IssueComment.IssueComment) -> Comment:
    """Convert a PyGithub issue comment into a migratron Comment."""
    return Comment(
        body=gh_comment.body or "",
        author=gh_comment.user.login if gh_comment.user else "",
        created_at=gh_comment.created_at,
    )


class GitHubIssueHost:
    """IssueHost implementation backed by the GitHub REST API."""

    def __init__(self, client: Github) -> None:
        self.client: Github = client
        self._repos: dict[RepoRef, Repository] = {}

    def _repo(self, repo: RepoRef) -> Repository:
        if repo not in self._repos:
            try:
                self._repos[repo] = self.client.get_repo(repo.full_name)
            except UnknownObjectException as e:
                msg = f"Repository {repo} not found"
                raise MigrationError(msg) from e
            except GithubException as e:
                msg = f"Error loading repository {repo}: {e}"
                raise MigrationError(msg) from e
        return self._repos[repo]

    def _gh_issue(self, repo: RepoRef, number: int) -> github.Issue.Issue:
        try:
            return self._repo(repo).get_issue(number)
        except GithubException as e:
            msg = f"Failed to get issue {repo}#{number}: {e}"
            raise MigrationError(msg) from e

    def list_issues(self, repo: RepoRef) -> Iterator[Issue]:
        try:
            for gh_issue in self._repo(repo).get_issues(state="open", sort="created", direction="desc"):
                yield to_issue(gh_issue)
        except GithubException as e:
            msg = f"Failed to list issues of {repo}: {e}"
            raise MigrationError(msg) from e

    def get_issue(self, repo: RepoRef, number: int) -> Issue:
        return to_issue(self._gh_issue(repo, number))

    def create_issue(self, repo: RepoRef, request: IssueMigrationRequest) -> Issue:
        try:
            if request.labels is None:
                gh_issue = self._repo(repo).create_issue(title=request.title, body=request.body)
            else:
                gh_issue = self._repo(repo).create_issue(
                    title=request.title, body=request.body, labels=request.labels
                )
        except GithubException as e:
            msg = f"Failed to create issue in {repo}: {e}"
            raise MigrationError(msg) from e
        logger.debug(f"Created issue {repo}#{gh_issue.number}: {request.title}")
        return to_issue(gh_issue)

    def list_comments(self, repo: RepoRef, number: int) -> list[Comment]:
        gh_issue = self._gh_issue(repo, number)
        try:
            return [to_comment(c) for c in gh_issue.get_comments()]
        except GithubException as e:
            msg = f"Failed to list comments of {repo}#{number}: {e}"
            raise MigrationError(msg) from e

    def create_comment(self, repo: RepoRef, number: int, body: str) -> None:
        gh_issue = self._gh_issue(repo, number)
        try:
            gh_issue.create_comment(body)
        except GithubException as e:
            msg = f"Failed to comment on {repo}#{number}: {e}"
            raise MigrationError(msg) from e
        logger.debug(f"Commented on {repo}#{number}")

    def add_labels(self, repo: RepoRef, number: int, labels: list[str]) -> None:
        gh_issue = self._gh_issue(repo, number)
        try:
            gh_issue.add_to_labels(*labels)
        except GithubException as e:
            msg = f"Failed to add labels {labels} to {repo}#{number}: {e}"
            raise MigrationError(msg) from e
        logger.debug(f"Added labels {labels} to {repo}#{number}")

    def get_user(self, login: str) -> str:
        try:
            return self.client.get_user(login).login
        except UnknownObjectException as e:
            msg = f"GitHub user {login!r} not found"
            raise MigrationError(msg) from e
        except GithubException as e:
            msg = f"Failed to look up GitHub user {login!r}: {e}"
            raise MigrationError(msg) from e
