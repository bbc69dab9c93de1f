"""
Custom exception classes for the migratron issue migration tool.
"""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for migration errors."""


class ConfigurationError(MigrationError):
    """Raised when the environment or command-line configuration is invalid."""


class EditorError(MigrationError):
    """Raised when the external editor round-trip fails."""


class PromptAbortedError(MigrationError):
    """Raised when the operator closes the input stream during a prompt."""


class IssueNotMigratableError(MigrationError):
    """Raised when a requested issue must not be migrated (pull request or opt-out label)."""
