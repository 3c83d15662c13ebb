"""commitgen - Infer conventional commit messages from the files you changed."""

from .cli.main import CommitGen
from .core.generator import CommitGenerator, EmptyChangeSetError
from .core.git import GitError, GitOperations
from .core.message import CommitStructure, format_commit_message
from .core.status import ChangeSet, parse_status

__version__ = "0.1.0"

__all__ = [
    "CommitGen",
    "CommitGenerator",
    "EmptyChangeSetError",
    "GitOperations",
    "GitError",
    "CommitStructure",
    "format_commit_message",
    "ChangeSet",
    "parse_status",
]
