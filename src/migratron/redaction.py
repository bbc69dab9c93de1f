"""Detect references to internal-only systems in issue text."""

from __future__ import annotations

from typing import Final

# Substrings that indicate ticketing, wiki, chat or whiteboard links
INTERNAL_URI_PARTS: Final[tuple[str, ...]] = (
    "jira",
    "confluence.eng",
    "drive.google",
    "slack.com",
    "miro.com",
)


def scan_for_internal(text: str | None) -> bool:
    """Return True if any internal reference occurs anywhere in text.

    Matching is case-sensitive and substring based, without word boundaries.
    """
    if not text:
        return False
    return any(part in text for part in INTERNAL_URI_PARTS)
