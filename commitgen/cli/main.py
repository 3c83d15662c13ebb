"""Main CLI module for commitgen."""

import logging
import sys
from pathlib import Path

import click

from ..config.settings import Config
from ..core.classifier import CommitTypeOption, TypeChooser, suggested_type
from ..core.generator import CommitGenerator, EmptyChangeSetError, FooterProvider
from ..core.git import GitError, GitOperations
from ..core.message import format_commit_message, format_footer
from ..core.status import parse_status
from . import console

logger = logging.getLogger(__name__)


class CommitGen:
    """Main application class."""

    def __init__(self, config: Config | None = None):
        """Initialize commitgen."""
        self.git = GitOperations()
        self.config = config if config is not None else Config.from_env()

    def _read_status(self, status: str | None) -> str:
        """Use the given status text, or ask git for it."""
        if status is not None:
            return status
        if not self.git.is_repository():
            raise GitError("Not inside a git repository.")
        return self.git.get_status()

    def _make_chooser(self, commit_type: str | None, auto_accept: bool) -> TypeChooser:
        """Pick how the commit type gets decided."""
        if commit_type:
            return lambda options: commit_type
        if auto_accept:
            return suggested_type

        def choose(options: list[CommitTypeOption]) -> str | None:
            return console.select_commit_type(options)

        return choose

    def _make_footer_provider(self, issue: str | None) -> FooterProvider:
        """Pick where the footer issue reference comes from."""
        if issue is not None:
            return lambda: format_footer(issue)
        return lambda: format_footer(console.prompt_issue_number())

    def _deliver(
        self, message: str, output: Path | None, print_only: bool, commit: bool, auto_accept: bool
    ) -> None:
        """Hand the finished message to its consumers."""
        if print_only:
            click.echo(message)
        else:
            console.print_info("Generated Commit Message:")
            console.print_commit_message(message)

        if output is not None:
            output.write_text(message + "\n", encoding="utf-8")
            logger.debug("Wrote commit message to %s", output)
            console.print_success(f"Commit message written to {output}")

        if commit:
            if not auto_accept and not console.confirm_action("Create this commit?"):
                console.print_info("Commit skipped.")
                return
            if not self.git.create_commit(message):
                console.print_warning("No staged changes to commit. Stage files first.")
                return
            console.print_success("Commit created successfully!")

    def run(
        self,
        status: str | None = None,
        commit_type: str | None = None,
        auto_accept: bool = False,
        issue: str | None = None,
        output: Path | None = None,
        print_only: bool = False,
        commit: bool = False,
        debug: bool = False,
    ) -> str | None:
        """Run the main application logic and return the generated message."""
        console.use_stderr(print_only)
        console.setup_logging(debug)

        config = self.config
        if issue is not None:
            config = config.override(include_footer=True)
        generator = CommitGenerator(
            max_files_in_body=config.max_files_in_body,
            include_footer=config.include_footer,
        )

        try:
            changes = parse_status(self._read_status(status))
            if not print_only and not changes.is_empty:
                console.print_changes(changes)

            structure = generator.build_structure(
                changes,
                self._make_chooser(commit_type, auto_accept),
                self._make_footer_provider(issue),
            )
            if structure is None:
                console.print_info("Commit message generation cancelled.")
                return None

            message = format_commit_message(structure)
            self._deliver(message, output, print_only, commit, auto_accept)
            return message

        except EmptyChangeSetError:
            console.print_warning("No changes to commit")
            return None
        except (GitError, OSError) as e:
            console.print_error(str(e))
            if debug:
                logger.debug("Error details:", exc_info=True)
            sys.exit(1)
