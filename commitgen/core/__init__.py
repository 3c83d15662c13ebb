"""Core modules for commitgen.

This module contains the message inference pipeline:
- Status parsing
- Commit type detection
- Scope, subject and body composition
- Message formatting
- Git operations
"""

from .body import compose_body, summarize_changes
from .classifier import (
    COMMIT_TYPES,
    CommitTypeOption,
    detect_commit_type,
    rank_commit_types,
    select_commit_type,
)
from .generator import CommitGenerator, EmptyChangeSetError
from .git import GitError, GitOperations
from .message import CommitStructure, format_commit_message, format_footer
from .scope import resolve_scope
from .status import ChangeSet, parse_status
from .subject import categorize_files, compose_subject, file_stem

__all__ = [
    "ChangeSet",
    "parse_status",
    "COMMIT_TYPES",
    "CommitTypeOption",
    "detect_commit_type",
    "rank_commit_types",
    "select_commit_type",
    "resolve_scope",
    "categorize_files",
    "compose_subject",
    "file_stem",
    "compose_body",
    "summarize_changes",
    "CommitStructure",
    "format_commit_message",
    "format_footer",
    "CommitGenerator",
    "EmptyChangeSetError",
    "GitOperations",
    "GitError",
]
