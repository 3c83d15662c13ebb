#!/usr/bin/env python3
"""Entry point for running commitgen as a module."""

import sys
from pathlib import Path
from typing import NoReturn

import click

from .cli import console
from .cli.main import CommitGen
from .config.settings import Config, ConfigError


def handle_error(error: BaseException) -> NoReturn:
    """Handle errors in a consistent way."""
    if isinstance(error, KeyboardInterrupt):
        console.print_error("\nOperation cancelled by user.")
        sys.exit(1)
    else:
        console.print_error(f"An error occurred: {str(error)}")
        sys.exit(1)


@click.command()
@click.option("-y", "--yes", is_flag=True, help="Accept the suggested commit type without prompting")
@click.option("-t", "--type", "commit_type", metavar="TYPE", help="Use this commit type")
@click.option(
    "--footer/--no-footer",
    default=None,
    help="Ask for a related issue number and add a closing footer",
)
@click.option(
    "-i",
    "--issue",
    metavar="NUMBER",
    help="Issue closed by this commit (adds a footer, not allowed with --no-footer)",
)
@click.option(
    "--max-files-in-body",
    type=click.IntRange(min=1),
    help="List files in the body up to this many changes, summarize beyond",
)
@click.option(
    "--status-file",
    type=click.File("r"),
    help="Read porcelain status from a file ('-' for stdin) instead of running git",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the commit message to this file",
)
@click.option("-p", "--print", "print_only", is_flag=True, help="Print only the commit message")
@click.option("-c", "--commit", is_flag=True, help="Create the commit with the staged changes")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
def main(
    yes: bool,
    commit_type: str | None,
    footer: bool | None,
    issue: str | None,
    max_files_in_body: int | None,
    status_file,
    output: Path | None,
    print_only: bool,
    commit: bool,
    debug: bool,
) -> None:
    """Generate a conventional commit message from the working tree status."""
    if footer is False and issue is not None:
        raise click.BadOptionUsage("issue", "--issue cannot be combined with --no-footer.")

    try:
        config = Config.from_env().override(
            max_files_in_body=max_files_in_body, include_footer=footer
        )
    except ConfigError as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        app = CommitGen(config)
        app.run(
            status=status_file.read() if status_file is not None else None,
            commit_type=commit_type,
            auto_accept=yes,
            issue=issue,
            output=output,
            print_only=print_only,
            commit=commit,
            debug=debug,
        )
    except (KeyboardInterrupt, Exception) as e:
        handle_error(e)


if __name__ == "__main__":
    main()
