"""Commit message structure and formatting."""

from dataclasses import dataclass


@dataclass
class CommitStructure:
    """Parts of a conventional commit message."""

    type: str
    subject: str
    scope: str | None = None
    body: str | None = None
    footer: str | None = None

    @property
    def header(self) -> str:
        """Return the ``type(scope): subject`` line."""
        prefix = f"{self.type}({self.scope})" if self.scope else self.type
        return f"{prefix}: {self.subject}"


def format_footer(issue: str | None) -> str | None:
    """Turn an issue reference into a closing footer."""
    reference = (issue or "").strip().lstrip("#").strip()
    if not reference:
        return None
    return f"Closes #{reference}"


def format_commit_message(structure: CommitStructure) -> str:
    """Format a commit structure as the final message text."""
    sections = [structure.header]

    if structure.body and structure.body.strip():
        sections.append(structure.body)

    if structure.footer and structure.footer.strip():
        sections.append(structure.footer)

    return "\n\n".join(sections)
