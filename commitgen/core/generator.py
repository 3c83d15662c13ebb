"""Commit message generation pipeline."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .body import DEFAULT_MAX_FILES_IN_BODY, compose_body
from .classifier import TypeChooser, select_commit_type
from .message import CommitStructure, format_commit_message
from .scope import resolve_scope
from .status import ChangeSet, parse_status
from .subject import compose_subject

logger = logging.getLogger(__name__)

FooterProvider = Callable[[], str | None]


class EmptyChangeSetError(Exception):
    """Raised when a status snapshot contains no usable changes."""

    pass


@dataclass
class CommitGenerator:
    """Turns working tree status into a conventional commit message."""

    max_files_in_body: int = DEFAULT_MAX_FILES_IN_BODY
    include_footer: bool = False

    def build_structure(
        self,
        changes: ChangeSet,
        chooser: TypeChooser,
        footer_provider: FooterProvider | None = None,
    ) -> CommitStructure | None:
        """
        Build the commit structure for a change set.

        Args:
            changes: Parsed change set
            chooser: Picks the commit type from the ranked candidates
            footer_provider: Supplies the footer when footers are enabled

        Returns:
            CommitStructure, or None if type selection was aborted

        Raises:
            EmptyChangeSetError: If the change set has no paths
        """
        if changes.is_empty:
            raise EmptyChangeSetError("No changes to commit")

        total = changes.total
        commit_type = select_commit_type(changes, chooser)
        if commit_type is None:
            return None

        footer = None
        if self.include_footer and footer_provider is not None:
            footer = footer_provider()

        structure = CommitStructure(
            type=commit_type,
            scope=resolve_scope(changes),
            subject=compose_subject(changes, commit_type, total),
            body=compose_body(changes, total, self.max_files_in_body),
            footer=footer,
        )
        logger.debug("Built commit structure: %s", structure)
        return structure

    def generate(
        self,
        status: str,
        chooser: TypeChooser,
        footer_provider: FooterProvider | None = None,
    ) -> str | None:
        """Parse status text and return the formatted message, or None if aborted."""
        changes = parse_status(status)
        structure = self.build_structure(changes, chooser, footer_provider)
        if structure is None:
            return None
        return format_commit_message(structure)
