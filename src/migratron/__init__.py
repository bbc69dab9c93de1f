"""
migratron

Walks a maintainer through migrating issues (title, body, labels, comments)
between GitHub repositories, one confirmed step at a time, and records
provenance on the source issue.
"""

from __future__ import annotations

from .cli import main
from .config import MigratronConfig, load_config
from .exceptions import (
    ConfigurationError,
    EditorError,
    IssueNotMigratableError,
    MigrationError,
    PromptAbortedError,
)
from .orchestrator import MigrationStats, Migrator
from .utils import setup_logging

# Package version
__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EditorError",
    "IssueNotMigratableError",
    "MigrationError",
    "MigrationStats",
    "MigratronConfig",
    "Migrator",
    "PromptAbortedError",
    "load_config",
    "main",
    "setup_logging",
]
