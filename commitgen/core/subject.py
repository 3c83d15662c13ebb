"""Subject line composition."""

import logging
import re

from .status import ChangeSet

logger = logging.getLogger(__name__)

DOMINANCE_THRESHOLD = 0.6

# Patterns for grouping files into a human readable category
FILE_CATEGORIES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("components", re.compile(r"components?", re.IGNORECASE)),
    ("API routes", re.compile(r"api|routes?|controllers?", re.IGNORECASE)),
    ("utilities", re.compile(r"utils?|helpers?", re.IGNORECASE)),
    ("styles", re.compile(r"\.css$|\.scss$|\.less$|styles?", re.IGNORECASE)),
    ("tests", re.compile(r"test|spec|__tests__", re.IGNORECASE)),
    ("configuration", re.compile(r"config|\.config\.", re.IGNORECASE)),
    ("types", re.compile(r"types?|\.d\.ts$", re.IGNORECASE)),
    ("documentation", re.compile(r"readme|docs?", re.IGNORECASE)),
    ("models", re.compile(r"models?|schemas?", re.IGNORECASE)),
    ("services", re.compile(r"services?", re.IGNORECASE)),
)

FALLBACK_SUBJECTS = {
    "feat": "implement new feature",
    "fix": "fix multiple issues",
    "refactor": "refactor code structure",
    "docs": "update documentation",
    "test": "add test coverage",
    "style": "format code",
    "chore": "update dependencies",
}

_EXTENSION = re.compile(r"\.[^/.]+$")


def file_stem(path: str) -> str:
    """Return the last path segment without its final extension."""
    name = path.rsplit("/", 1)[-1] or path
    # Dotfiles like ".gitignore" keep their full name
    return _EXTENSION.sub("", name) or name


def categorize_files(paths: list[str]) -> str | None:
    """
    Find the first category that dominates a pool of files.

    A category dominates when at least 60% of the files match its pattern.

    Args:
        paths: File pool to categorize

    Returns:
        Category name, or None when no category dominates
    """
    if not paths:
        return None

    for category, pattern in FILE_CATEGORIES:
        matches = sum(1 for path in paths if pattern.search(path))
        if matches >= len(paths) * DOMINANCE_THRESHOLD:
            return category
    return None


def compose_subject(changes: ChangeSet, commit_type: str, total: int) -> str:
    """
    Build the subject line for a change set.

    Args:
        changes: Parsed change set
        commit_type: Commit type chosen for the message
        total: Number of files in the change set

    Returns:
        Subject line without the type prefix
    """
    if len(changes.added) == total:
        if total == 1:
            return f"add {file_stem(changes.added[0])}"
        category = categorize_files(list(changes.added))
        if category:
            return f"add {category}"
        return f"add {total} new files"

    if len(changes.deleted) == total:
        if total == 1:
            return f"remove {file_stem(changes.deleted[0])}"
        return f"remove {total} files"

    if len(changes.modified) == 1 and total == 1:
        return f"update {file_stem(changes.modified[0])}"

    pool = [*changes.modified, *changes.added, *changes.deleted]

    if total <= 3:
        names = ", ".join(file_stem(path) for path in pool[:3])
        # Renamed or untracked only: nothing in the pool to name
        if names:
            return f"update {names}"

    category = categorize_files(pool)
    if category:
        return f"update {category}"

    logger.debug("No dominant category, using fallback subject for %s", commit_type)
    return FALLBACK_SUBJECTS.get(commit_type, f"update {total} files")
