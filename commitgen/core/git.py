"""Git operations module."""

import logging
import subprocess

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Git operation error."""

    pass


class GitOperations:
    """Basic git operations handler."""

    @staticmethod
    def is_repository() -> bool:
        """Check whether the current directory is inside a git work tree."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--is-inside-work-tree"],
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError:
            return False
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        return result.stdout.strip() == "true"

    @staticmethod
    def get_status() -> str:
        """Get the porcelain status of the working tree."""
        try:
            result = subprocess.run(
                ["git", "status", "--porcelain"], capture_output=True, text=True, check=True
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr if e.stderr else str(e)
            raise GitError(f"Failed to get status: {error_msg}")

    @staticmethod
    def create_commit(message: str) -> bool:
        """Create a commit with the given message."""
        try:
            # First verify we have staged changes
            status = subprocess.run(
                ["git", "diff", "--cached", "--quiet"],
                capture_output=True,
                text=True,
            )

            if status.returncode == 0:
                # No staged changes
                return False

            result = subprocess.run(
                ["git", "commit", "-m", message], capture_output=True, text=True, check=True
            )
            if result.stderr:
                logger.warning("Git warning while committing: %s", result.stderr.strip())
            return True

        except subprocess.CalledProcessError as e:
            error_msg = e.stderr if e.stderr else str(e)
            raise GitError(f"Failed to create commit: {error_msg}")
