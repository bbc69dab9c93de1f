"""
Label handling for migrated issues.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

# Labels that only make sense in the source repository
BANNED_LABELS: Final[frozenset[str]] = frozenset({"migration/essential"})

# Issues carrying this label are never migrated; set by issue authors
OPT_OUT_LABEL: Final[str] = "migration/selfservice"

DEFAULT_MIGRATED_LABEL: Final[str] = "migration/migrated"
DEFAULT_IMPORTED_LABEL: Final[str] = "migration/imported"


def sync_labels(
    source_labels: Iterable[str],
    imported_label: str,
    banned_labels: Collection[str] = BANNED_LABELS,
) -> list[str]:
    """Compute the labels of a destination issue.

    The imported marker always comes first and appears exactly once. Source
    labels follow in their original order, minus banned ones.
    """
    labels = [imported_label]
    for name in source_labels:
        if name in banned_labels or name in labels:
            continue
        labels.append(name)
    return labels
