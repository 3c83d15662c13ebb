"""Scope resolution from common path structure."""

import logging
import re

from .status import ChangeSet

logger = logging.getLogger(__name__)

# Checked in order when files span several top-level directories
SCOPE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("components", re.compile(r"components?", re.IGNORECASE)),
    ("api", re.compile(r"api|routes?", re.IGNORECASE)),
    ("utils", re.compile(r"utils?|helpers?", re.IGNORECASE)),
    ("types", re.compile(r"types?", re.IGNORECASE)),
)


def _top_level_directories(paths: list[str]) -> set[str]:
    """Collect the first segment of every path that lives in a directory."""
    return {path.split("/", 1)[0] for path in paths if "/" in path} - {""}


def resolve_scope(changes: ChangeSet) -> str | None:
    """
    Derive a scope token from the tracked paths of a change set.

    Untracked files do not take part.

    Returns:
        The scope, or None when the paths share nothing useful
    """
    paths = changes.tracked_paths
    if not paths:
        return None

    directories = _top_level_directories(paths)
    if len(directories) == 1:
        (directory,) = directories
        if directory != ".":
            logger.debug("Scope from shared directory: %s", directory)
            return directory

    for scope, pattern in SCOPE_PATTERNS:
        if all(pattern.search(path) for path in paths):
            logger.debug("Scope from path pattern: %s", scope)
            return scope

    return None
