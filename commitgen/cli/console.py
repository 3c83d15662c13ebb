"""Console output formatting and user interaction."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from ..core.classifier import CommitTypeOption
from ..core.status import ChangeSet

console = Console()

_CHANGE_STYLES = (
    ("added", "green", "+"),
    ("modified", "yellow", "~"),
    ("deleted", "red", "-"),
    ("renamed", "blue", ">"),
    ("untracked", "dim", "?"),
)


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the command line run."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug)],
        force=True,
    )


def print_changes(changes: ChangeSet) -> None:
    """Print the change set grouped by kind of change."""
    console.print("\n[bold blue]📜 Changes detected in the following files:[/bold blue]")
    for attr, style, marker in _CHANGE_STYLES:
        for path in getattr(changes, attr):
            console.print(f"  [{style}]{marker} {escape(path)}[/{style}]")


def select_commit_type(options: list[CommitTypeOption]) -> str | None:
    """Let the user pick a commit type, returning None when cancelled."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    for index, option in enumerate(options, start=1):
        label = f"[bold green]{option.label}[/bold green]" if option.suggested else option.label
        table.add_row(f"{index}.", label, option.description, f"[dim]{option.detail}[/dim]")

    console.print("\n[bold blue]🤔 Select commit type:[/bold blue]")
    console.print(table)

    choices = [str(index) for index in range(1, len(options) + 1)]
    try:
        answer = Prompt.ask(
            "Commit type (q to cancel)",
            choices=choices + ["q"],
            default="1",
            show_choices=False,
            console=console,
        )
    except EOFError:
        return None

    if answer == "q":
        return None
    return options[int(answer) - 1].label


def prompt_issue_number() -> str:
    """Ask for a related issue number; empty when skipped."""
    try:
        return Prompt.ask(
            "Related issue number (optional, press Enter to skip)",
            default="",
            show_default=False,
            console=console,
        )
    except EOFError:
        return ""


def print_commit_message(message: str) -> None:
    """Print formatted commit message."""
    console.print(Panel(Text(message), expand=False, border_style="green"))


def confirm_action(prompt: str) -> bool:
    """Ask user to confirm an action."""
    return Confirm.ask(f"\n{prompt}", console=console)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]✅ {escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"\n[bold red]❌ {escape(message)}[/bold red]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"\n[bold blue]ℹ️ {escape(message)}[/bold blue]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"\n[bold yellow]⚠️ {escape(message)}[/bold yellow]")


def use_stderr(enabled: bool = True) -> None:
    """Send console output to stderr so stdout carries only the message."""
    console.stderr = enabled
