"""Status parsing module."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSet:
    """Paths from one status snapshot, grouped by kind of change."""

    modified: tuple[str, ...] = ()
    added: tuple[str, ...] = ()
    deleted: tuple[str, ...] = ()
    renamed: tuple[str, ...] = ()
    untracked: tuple[str, ...] = ()

    @property
    def tracked_paths(self) -> list[str]:
        """Paths git already knows about (untracked excluded)."""
        return [*self.modified, *self.added, *self.deleted, *self.renamed]

    @property
    def all_paths(self) -> list[str]:
        """Every path in the change set."""
        return [*self.tracked_paths, *self.untracked]

    @property
    def total(self) -> int:
        """Number of paths across all categories."""
        return len(self.all_paths)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


_C_ESCAPES = {
    b"a": b"\a",
    b"b": b"\b",
    b"f": b"\f",
    b"n": b"\n",
    b"r": b"\r",
    b"t": b"\t",
    b"v": b"\v",
}
_C_ESCAPE = re.compile(rb"\\([0-3][0-7]{2}|.)")
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_RENAME = re.compile(rf"^({_QUOTED}|.+?) -> ({_QUOTED}|.+)$")


def _unquote(path: str) -> str:
    """Undo git's C-style quoting of a path, if present."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    def _replace(match: re.Match[bytes]) -> bytes:
        sequence = match.group(1)
        if len(sequence) == 3:
            return bytes([int(sequence, 8)])
        return _C_ESCAPES.get(sequence, sequence)

    # Octal escapes are UTF-8 bytes, decode after all of them are replaced
    raw = _C_ESCAPE.sub(_replace, path[1:-1].encode("utf-8"))
    return raw.decode("utf-8", errors="replace")


def _clean_path(status: str, path: str) -> str:
    """Unquote a path, handling both sides of an ``old -> new`` rename."""
    if "R" in status:
        match = _RENAME.match(path)
        if match:
            return " -> ".join(_unquote(side) for side in match.groups())
    return _unquote(path)


def _classify_status(status: str) -> str | None:
    """Map a two-character status code to a change category."""
    # Order matters: "RM" is reported as modified, "MA" as modified, etc.
    if "M" in status:
        return "modified"
    if "A" in status:
        return "added"
    if "D" in status:
        return "deleted"
    if "R" in status:
        return "renamed"
    if status == "??":
        return "untracked"
    return None


def parse_status(text: str) -> ChangeSet:
    """
    Parse ``git status --porcelain`` output into a ChangeSet.

    Args:
        text: Raw status output, one ``XY path`` entry per line

    Returns:
        ChangeSet with paths in the order they were reported
    """
    categories: dict[str, list[str]] = {
        "modified": [],
        "added": [],
        "deleted": [],
        "renamed": [],
        "untracked": [],
    }

    for line in text.splitlines():
        # Keep leading blanks, they are part of the status code
        line = line.rstrip()
        if not line.strip():
            continue

        status = line[:2]
        path = _clean_path(status, line[3:].strip())

        category = _classify_status(status)
        if category is None:
            logger.debug("Skipping unrecognized status line: %r", line)
            continue

        categories[category].append(path)

    return ChangeSet(**{name: tuple(paths) for name, paths in categories.items()})
