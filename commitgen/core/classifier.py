"""Commit type detection and ranking."""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .status import ChangeSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitTypeOption:
    """A commit type offered to the user."""

    label: str
    description: str
    detail: str
    suggested: bool = False


COMMIT_TYPES: tuple[CommitTypeOption, ...] = (
    CommitTypeOption("feat", "A new feature", "✨ New functionality"),
    CommitTypeOption("fix", "A bug fix", "🐛 Bug fixes"),
    CommitTypeOption("docs", "Documentation", "📚 Documentation changes"),
    CommitTypeOption("style", "Code style", "💎 Formatting, semicolons"),
    CommitTypeOption("refactor", "Code refactoring", "♻️ Code restructuring"),
    CommitTypeOption("test", "Adding tests", "🧪 Test coverage"),
    CommitTypeOption("chore", "Maintenance", "🔧 Build, dependencies"),
    CommitTypeOption("perf", "Performance", "⚡ Performance improvements"),
)

_TEST_PATTERN = re.compile(r"test|spec|__tests__", re.IGNORECASE)
_DOCS_PATTERN = re.compile(r"readme|\.md$", re.IGNORECASE)
_STYLE_PATTERN = re.compile(r"\.css$|\.scss$|\.less$", re.IGNORECASE)
_MANIFEST_FILES = frozenset({"package.json", "package-lock.json"})

# Evaluated in order, first rule that holds wins
TYPE_DETECTION_RULES: tuple[tuple[str, Callable[[list[str]], bool]], ...] = (
    ("test", lambda paths: any(_TEST_PATTERN.search(p) for p in paths)),
    ("chore", lambda paths: any(p in _MANIFEST_FILES for p in paths)),
    ("docs", lambda paths: any(_DOCS_PATTERN.search(p) for p in paths)),
    ("style", lambda paths: all(_STYLE_PATTERN.search(p) for p in paths)),
)

TypeChooser = Callable[[list[CommitTypeOption]], str | None]


def detect_commit_type(changes: ChangeSet) -> str | None:
    """
    Suggest a commit type from the changed paths.

    Args:
        changes: Parsed change set

    Returns:
        Suggested commit type label, or None when no rule applies
    """
    paths = changes.all_paths
    for commit_type, rule in TYPE_DETECTION_RULES:
        if rule(paths):
            logger.debug("Detected commit type %s", commit_type)
            return commit_type
    return None


def rank_commit_types(suggested: str | None = None) -> list[CommitTypeOption]:
    """Return the commit types with the suggested one moved to the front."""
    options = list(COMMIT_TYPES)
    match = next((option for option in options if option.label == suggested), None)
    if match is None:
        return options

    annotated = replace(match, description=f"{match.description} (suggested)", suggested=True)
    return [annotated] + [option for option in options if option.label != suggested]


def select_commit_type(changes: ChangeSet, chooser: TypeChooser) -> str | None:
    """
    Ask ``chooser`` to pick a commit type from the ranked candidates.

    The chooser receives the ranked options and returns a label, which may
    be a type outside the default set, or None to abort.
    """
    options = rank_commit_types(detect_commit_type(changes))
    selected = chooser(options)
    if not selected:
        logger.debug("Commit type selection aborted")
        return None
    return selected


def suggested_type(options: Sequence[CommitTypeOption]) -> str:
    """Pick the label a non-interactive run should use."""
    return options[0].label
