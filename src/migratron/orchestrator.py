"""Migration orchestrator that walks the operator through each issue.

The Migrator class drives one issue at a time from the source repository to
the destination repository. It:
1. Fetches the source issue and its comments
2. Applies skip rules (pull requests, opt-out label, already migrated)
3. Asks the operator to build the destination payload (issue_builder.py)
4. Creates the destination issue and records provenance on the source

Per-issue Flow
--------------
    Fetched
       │  pull request / opt-out label / migrated label (batch only)
       ├──────────────────────────────────────────────► skipped
       ▼
    "Import Issue?" ── no ──► declined (no writes)
       │
       ▼
    RequestBuilt
       │
    "Migrate Resource?" ── no ──► declined (no writes)
       │
       ▼
    Created ──► Commented ──► Labeled

Write Ordering
--------------
The destination issue is created first, then the provenance comment is left
on the source, then the source is labeled as migrated. A failure after the
create leaves the source unlabeled, so a later batch run offers it again and
the operator has to reconcile the duplicate manually.

Error Handling
--------------
- Operator "no" answers are normal outcomes, not errors
- API, editor and prompt errors propagate immediately; a batch run stops at
  the first one
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from .editor import edit_in_editor
from .exceptions import IssueNotMigratableError
from .issue_builder import build_issue_request
from .labels import OPT_OUT_LABEL

if TYPE_CHECKING:
    from .config import MigratronConfig
    from .issue_builder import Editor
    from .models import Issue
    from .prompts import Prompter
    from .protocols import IssueHost

logger = logging.getLogger(__name__)

SEPARATOR = "-------------------------------"

Outcome = Literal["migrated", "declined"]


@dataclass
class MigrationStats:
    """Counts collected during a batch run."""

    migrated: int = 0
    declined: int = 0
    skipped: int = 0


class Migrator:
    """Migrates issues from config.from_repo to config.to_repo.

    Usage:
        host = GitHubIssueHost(client)
        migrator = Migrator(host, config, ConsolePrompter())
        migrator.migrate_issue(42)
    """

    _host: IssueHost
    _config: MigratronConfig
    _prompter: Prompter
    _editor: Editor

    def __init__(
        self,
        host: IssueHost,
        config: MigratronConfig,
        prompter: Prompter,
        editor: Editor = edit_in_editor,
    ) -> None:
        self._host = host
        self._config = config
        self._prompter = prompter
        self._editor = editor

    def migrate_issue(self, number: int) -> Outcome:
        """Migrate a single issue by number.

        Raises:
            IssueNotMigratableError: If the issue is a pull request or carries the opt-out label
        """
        issue = self._host.get_issue(self._config.from_repo, number)
        if issue.is_pull_request:
            msg = "This is a PR, can not migrate"
            raise IssueNotMigratableError(msg)
        if issue.has_label(OPT_OUT_LABEL):
            msg = f"This issue has label {OPT_OUT_LABEL} applied, exiting"
            raise IssueNotMigratableError(msg)

        return self._migrate_one(issue)

    def migrate_all(self) -> MigrationStats:
        """Offer every open issue of the source repository, newest first.

        Stops at the first error; issues already processed stay migrated.
        """
        stats = MigrationStats()
        for issue in self._host.list_issues(self._config.from_repo):
            if issue.is_pull_request:
                continue
            if issue.has_label(OPT_OUT_LABEL) or issue.has_label(self._config.migrated_label):
                print(f"skipped: {issue.number}")
                stats.skipped += 1
                continue

            if self._migrate_one(issue) == "migrated":
                stats.migrated += 1
            else:
                stats.declined += 1

        print("Completed all issues!")
        logger.info(f"Batch finished: {stats.migrated} migrated, {stats.declined} declined, {stats.skipped} skipped")
        return stats

    def _migrate_one(self, issue: Issue) -> Outcome:
        """Run the interactive workflow for one issue."""
        source = self._config.from_repo
        target = self._config.to_repo

        comments = self._host.list_comments(source, issue.number)
        print(SEPARATOR)
        print(f"Migrating Issue {issue.number}\nTitle: {issue.title!r}\nBody: {issue.body!r}\nURL: {issue.html_url}\n")

        if not self._prompter.confirm("Import Issue?"):
            logger.info(f"Issue {source}#{issue.number} not imported")
            return "declined"

        request = build_issue_request(
            issue,
            comments,
            self._prompter,
            imported_label=self._config.imported_label,
            editor=self._editor,
        )

        if not self._prompter.confirm("Migrate Resource?"):
            logger.info(f"Issue {source}#{issue.number} not migrated")
            return "declined"

        created = self._host.create_issue(target, request)
        final_issue = self._host.get_issue(target, created.number)
        logger.info(f"Created {target}#{final_issue.number} from {source}#{issue.number}")

        login = self._host.get_user(self._config.login)
        self._host.create_comment(source, issue.number, f"Migrated to {final_issue.html_url}.")
        logger.debug(f"Left provenance comment on {source}#{issue.number} as {login}")

        self._host.add_labels(source, issue.number, [self._config.migrated_label])

        print(f"\n{SEPARATOR}")
        print(f"Successfully migrated issue {issue.number} to:")
        print(final_issue.html_url)
        print("Please review each issue for accuracy")
        print(f"{SEPARATOR}\n")
        return "migrated"
