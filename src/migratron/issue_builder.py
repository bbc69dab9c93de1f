"""Build the destination issue payload from a source issue, asking the operator at each step."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from .editor import edit_in_editor
from .labels import sync_labels
from .models import IssueMigrationRequest
from .redaction import scan_for_internal

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Sequence

    from .models import Comment, Issue
    from .prompts import Prompter

logger: logging.Logger = logging.getLogger(__name__)

Editor = Callable[[str, str], str]
"""Signature of edit_in_editor: (name_pattern, initial_content) -> edited content."""

COLLATED_HEADER: Final[str] = "\n### Collated Context\n"

BODY_FILE_PATTERN: Final[str] = "migratron.*.body.txt"
COLLATE_FILE_PATTERN: Final[str] = "migratron.*.collate.txt"


def format_timestamp(timestamp: dt.datetime | None) -> str:
    """Format a timestamp for collated comments.

    Returns:
        Formatted timestamp (e.g., "2024-01-15 10:30:45Z"), or an empty
        string when the timestamp is unknown.
    """
    if timestamp is None:
        return ""
    formatted = timestamp.isoformat(sep=" ", timespec="seconds")
    return formatted.replace("+00:00", "Z")


def format_comment(comment: Comment) -> str:
    """Format a comment as a context block for the collated section."""
    metadata = f"\nContext from {format_timestamp(comment.created_at)}"
    metadata += f"\nUser: {comment.author}"
    return "\n" + metadata + "\n" + comment.body + "\n"


def collate_comments(
    comments: Sequence[Comment],
    prompter: Prompter,
    editor: Editor = edit_in_editor,
) -> str:
    """Merge operator-selected comments into one block of text.

    Each comment is shown and added only if the operator accepts it. The
    result always goes through the editor for a final pass, even when empty.
    """
    collated = ""
    for comment in comments:
        flagged = scan_for_internal(comment.body)
        if flagged:
            print("\nAlert! Internal Terms found in comment. Forcing edit!")

        print(f"\nComment: {comment.body}")
        label = "Add Comment"
        if flagged:
            label = "Comment Alert! Internal Terms found in comment. Please be sure to edit!"
        if not prompter.confirm(label):
            continue

        collated += format_comment(comment)
        logger.debug(f"Collated comment by {comment.author}")

    return editor(COLLATE_FILE_PATTERN, collated)


def build_issue_request(
    issue: Issue,
    comments: Sequence[Comment],
    prompter: Prompter,
    *,
    imported_label: str,
    editor: Editor = edit_in_editor,
) -> IssueMigrationRequest:
    """Assemble the destination issue from the operator's choices.

    Title, body, labels and comments are offered one after another; each step
    can be skipped. Errors from prompts or the editor abort the whole build.
    """
    request = IssueMigrationRequest(title=issue.title, body=issue.body)

    title_label = "Edit Title"
    if scan_for_internal(issue.title):
        title_label = "Issue Title Alert! Internal Terms found in title. Please be sure to edit!"
    if prompter.confirm(title_label):
        request.title = prompter.ask_text("Update Title", default=issue.title)

    body_label = "Edit Body"
    if scan_for_internal(issue.body):
        body_label = "Issue Body Alert! Internal Terms found in body. Please be sure to edit!"
    if prompter.confirm(body_label):
        request.body = editor(BODY_FILE_PATTERN, issue.body)

    if prompter.confirm("Sync Labels"):
        request.labels = sync_labels(issue.labels, imported_label)

    if prompter.confirm("Collate Comments"):
        collated = collate_comments(comments, prompter, editor)
        if collated:
            request.body += COLLATED_HEADER + collated

    return request
