"""Commit body composition."""

import logging

from .status import ChangeSet

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILES_IN_BODY = 20

# Listing order and headers; untracked files are never listed
BODY_SECTIONS = (
    ("added", "Added"),
    ("modified", "Modified"),
    ("deleted", "Deleted"),
    ("renamed", "Renamed"),
)


def summarize_changes(changes: ChangeSet) -> str:
    """Summarize a change set as counts per category."""
    parts = []
    for attr, _ in BODY_SECTIONS:
        count = len(getattr(changes, attr))
        if count:
            parts.append(f"{count} {attr}")
    return f"Changes: {', '.join(parts)}"


def compose_body(
    changes: ChangeSet, total: int, max_files_in_body: int = DEFAULT_MAX_FILES_IN_BODY
) -> str:
    """
    Build the commit body.

    Args:
        changes: Parsed change set
        total: Number of files in the change set
        max_files_in_body: Largest change set listed file by file

    Returns:
        Per-file listing, or a one-line summary for large change sets
    """
    if total > max_files_in_body:
        logger.debug("%d files exceed body limit of %d, summarizing", total, max_files_in_body)
        return summarize_changes(changes)

    lines: list[str] = []
    for attr, header in BODY_SECTIONS:
        paths = getattr(changes, attr)
        if not paths:
            continue
        lines.append(f"{header}:")
        lines.extend(f"  - {path}" for path in paths)
        lines.append("")

    return "\n".join(lines).strip()
