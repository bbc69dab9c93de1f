"""
Command-line interface for the migratron issue migration tool.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import github_utils as ghu
from .config import load_config
from .exceptions import MigrationError
from .labels import DEFAULT_IMPORTED_LABEL, DEFAULT_MIGRATED_LABEL
from .orchestrator import Migrator
from .prompts import ConsolePrompter
from .utils import setup_logging

logger = logging.getLogger(__name__)


def _add_migration_options(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument("--login", help="your github login")
    _ = parser.add_argument(
        "--to-label",
        default=DEFAULT_MIGRATED_LABEL,
        help="label to denote an issue has been processed and migrated",
    )
    _ = parser.add_argument(
        "--from-label",
        default=DEFAULT_IMPORTED_LABEL,
        help="label to denote an issue has been created as result of an import",
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="migratron",
        description="Tools for migrating repositories",
        epilog="Reads MIGRATRON_TOKEN, MIGRATRON_FROM_REPO and MIGRATRON_TO_REPO (owner/repo) from the environment.",
    )
    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase console verbosity (-v for info, -vv for debug)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    issues = commands.add_parser("issues", help="Tools to migrate issues between repos")
    issue_commands = issues.add_subparsers(dest="issues_command", required=True)

    migrate = issue_commands.add_parser("migrate", help="Migrate a single issue")
    _ = migrate.add_argument("issue", type=int, metavar="issue#", help="Number of the issue to migrate")
    _add_migration_options(migrate)

    migrate_all = issue_commands.add_parser("all", help="migrate all repo issues to the new repo")
    _add_migration_options(migrate_all)

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    """Execute the selected issues command."""
    config = load_config(
        login=args.login,
        migrated_label=args.to_label,
        imported_label=args.from_label,
    )
    host = ghu.GitHubIssueHost(ghu.get_client(config.token))
    migrator = Migrator(host, config, ConsolePrompter())

    if args.issues_command == "migrate":
        _ = migrator.migrate_issue(args.issue)
    else:
        _ = migrator.migrate_all()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_arguments(argv)

    verbosity: int = getattr(args, "verbose", 0)
    setup_logging(verbosity=verbosity)

    try:
        run(args)
    except MigrationError as e:
        logger.error(f"Error: {e}")  # noqa: TRY400
        sys.exit(1)
    except Exception:
        logger.exception("Migration failed")
        sys.exit(1)

    sys.exit(0)
