"""
Pytest configuration and fixtures.

This module configures pytest behavior for different test types:
- Integration tests: Fail on any warnings from the code under test
- Unit tests: Allow warnings

It also provides in-memory stand-ins for the hosting platform and the
operator so the migration workflow runs without network or terminal.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from typing_extensions import override

import pytest

from migratron.config import MigratronConfig
from migratron.exceptions import MigrationError
from migratron.models import Comment, Issue, IssueMigrationRequest, RepoRef

if TYPE_CHECKING:
    from collections.abc import Generator, Iterator

SOURCE = RepoRef("acme", "internal")
TARGET = RepoRef("acme-oss", "public")

# Store warning records during test execution
_integration_test_warnings: dict[str, list[logging.LogRecord]] = {}


class IntegrationTestWarningHandler(logging.Handler):
    """Custom logging handler to capture warnings during integration tests."""

    test_nodeid: str

    def __init__(self, test_nodeid: str) -> None:
        super().__init__()
        self.test_nodeid = test_nodeid
        self.setLevel(logging.WARNING)

    @override
    def emit(self, record: logging.LogRecord) -> None:
        """Capture WARNING and above level logs."""
        if self.test_nodeid not in _integration_test_warnings:
            _integration_test_warnings[self.test_nodeid] = []
        _integration_test_warnings[self.test_nodeid].append(record)


@pytest.fixture(autouse=True)
def fail_on_log_warnings_for_integration_tests(
    request: pytest.FixtureRequest,
) -> Generator[None]:
    """
    Automatically fail integration tests if any WARNING level logs are emitted from the code under test.

    Warnings are acceptable when running the tool as an operator, but a clean
    end-to-end run is not expected to produce any.
    """
    is_integration_test = request.node.get_closest_marker("integration") is not None

    if not is_integration_test:
        yield
        return

    test_nodeid = request.node.nodeid
    _integration_test_warnings[test_nodeid] = []

    handler = IntegrationTestWarningHandler(test_nodeid)
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)

    try:
        yield
    finally:
        root_logger.removeHandler(handler)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[None]
) -> Generator[None]:  # type: ignore[misc]
    """
    Hook to check for warnings after test execution and mark test as failed if warnings were detected.
    """
    outcome = yield
    report = outcome.get_result()

    if call.when == "call" and report.outcome == "passed":
        test_nodeid = item.nodeid
        warning_records = _integration_test_warnings.get(test_nodeid, [])

        if warning_records:
            warning_messages = [
                f"{record.levelname}: {record.getMessage()} (in {record.name}:{record.lineno})"
                for record in warning_records
            ]

            report.outcome = "failed"
            report.longrepr = f"Integration test failed: {len(warning_records)} warning(s) detected:\n" + "\n".join(
                f"  - {msg}" for msg in warning_messages
            )

        _integration_test_warnings.pop(test_nodeid, None)


class FakeIssueHost:
    """In-memory IssueHost recording every write."""

    def __init__(self) -> None:
        self.issues: dict[tuple[RepoRef, int], Issue] = {}
        self.comments: dict[tuple[RepoRef, int], list[Comment]] = {}
        self.users: set[str] = {"octocat"}
        self.writes: list[tuple[str, RepoRef, int]] = []
        self.created: list[IssueMigrationRequest] = []
        self.fail_on: str | None = None

    def add_issue(self, repo: RepoRef, issue: Issue, comments: list[Comment] | None = None) -> Issue:
        self.issues[repo, issue.number] = issue
        self.comments[repo, issue.number] = comments or []
        return issue

    def _check(self, operation: str) -> None:
        if self.fail_on == operation:
            msg = f"{operation} failed"
            raise MigrationError(msg)

    def list_issues(self, repo: RepoRef) -> Iterator[Issue]:
        self._check("list_issues")
        in_repo = [issue for (r, _), issue in self.issues.items() if r == repo and issue.state == "open"]
        in_repo.sort(key=lambda i: i.created_at or dt.datetime.min.replace(tzinfo=dt.UTC), reverse=True)
        yield from in_repo

    def get_issue(self, repo: RepoRef, number: int) -> Issue:
        self._check("get_issue")
        try:
            return self.issues[repo, number]
        except KeyError:
            msg = f"Failed to get issue {repo}#{number}"
            raise MigrationError(msg) from None

    def create_issue(self, repo: RepoRef, request: IssueMigrationRequest) -> Issue:
        self._check("create_issue")
        number = 1 + max((n for (r, n) in self.issues if r == repo), default=0)
        issue = Issue(
            number=number,
            title=request.title,
            body=request.body,
            state="open",
            html_url=f"https://github.com/{repo}/issues/{number}",
            labels=list(request.labels or []),
        )
        self.add_issue(repo, issue)
        self.created.append(replace(request))
        self.writes.append(("create_issue", repo, number))
        return issue

    def list_comments(self, repo: RepoRef, number: int) -> list[Comment]:
        self._check("list_comments")
        return list(self.comments.get((repo, number), []))

    def create_comment(self, repo: RepoRef, number: int, body: str) -> None:
        self._check("create_comment")
        self.comments.setdefault((repo, number), []).append(Comment(body=body, author="octocat"))
        self.writes.append(("create_comment", repo, number))

    def add_labels(self, repo: RepoRef, number: int, labels: list[str]) -> None:
        self._check("add_labels")
        self.issues[repo, number].labels.extend(labels)
        self.writes.append(("add_labels", repo, number))

    def get_user(self, login: str) -> str:
        self._check("get_user")
        if login not in self.users:
            msg = f"GitHub user {login!r} not found"
            raise MigrationError(msg)
        return login


class ScriptedPrompter:
    """Prompter answering from a script keyed by prompt label.

    A list value is consumed one answer per prompt; a missing label is answered "no".
    """

    def __init__(
        self,
        answers: dict[str, bool | list[bool]] | None = None,
        texts: dict[str, str] | None = None,
    ) -> None:
        self.answers: dict[str, bool | list[bool]] = answers or {}
        self.texts: dict[str, str] = texts or {}
        self.asked: list[str] = []

    def confirm(self, label: str) -> bool:
        self.asked.append(label)
        answer = self.answers.get(label, False)
        if isinstance(answer, list):
            return answer.pop(0) if answer else False
        return answer

    def ask_text(self, label: str, default: str) -> str:
        self.asked.append(label)
        return self.texts.get(label, default)


class RecordingEditor:
    """Editor stand-in that returns a fixed replacement per name pattern."""

    def __init__(self, replacements: dict[str, str] | None = None) -> None:
        self.replacements: dict[str, str] = replacements or {}
        self.calls: list[tuple[str, str]] = []

    def __call__(self, name_pattern: str, initial_content: str) -> str:
        self.calls.append((name_pattern, initial_content))
        return self.replacements.get(name_pattern, initial_content)


def make_issue(number: int, *, labels: list[str] | None = None, **kwargs: object) -> Issue:
    """Build an open source issue with sensible defaults."""
    defaults: dict[str, object] = {
        "title": f"Issue {number}",
        "body": f"Body of issue {number}",
        "state": "open",
        "html_url": f"https://github.com/{SOURCE}/issues/{number}",
        "author": "reporter",
        "created_at": dt.datetime(2024, 1, number % 28 + 1, 10, 30, 45, tzinfo=dt.UTC),
    }
    defaults.update(kwargs)
    return Issue(number=number, labels=labels or [], **defaults)  # type: ignore[arg-type]


@pytest.fixture
def host() -> FakeIssueHost:
    return FakeIssueHost()


@pytest.fixture
def config() -> MigratronConfig:
    return MigratronConfig(from_repo=SOURCE, to_repo=TARGET, login="octocat", token="t0ken")
