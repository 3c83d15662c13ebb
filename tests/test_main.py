"""Tests for CLI main module."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from commitgen.__main__ import main
from commitgen.config.settings import Config


@pytest.fixture
def runner():
    """Fixture for CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_app():
    """Fixture for mocked CommitGen."""
    mock = MagicMock()
    mock.run = MagicMock()
    return mock


class TestCliBasic:
    """Test basic CLI functionality."""

    def test_help_text(self, runner):
        """Test help text is displayed."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_basic_run(self, runner, mock_app):
        """Test basic run without arguments."""
        with patch("commitgen.__main__.CommitGen") as mock_commit_gen:
            mock_commit_gen.return_value = mock_app
            result = runner.invoke(main)

            assert result.exit_code == 0
            mock_commit_gen.assert_called_once_with(Config())
            mock_app.run.assert_called_once_with(
                status=None,
                commit_type=None,
                auto_accept=False,
                issue=None,
                output=None,
                print_only=False,
                commit=False,
                debug=False,
            )

    def test_all_options(self, runner, mock_app, tmp_path):
        """Test run with all options given."""
        status_file = tmp_path / "status.txt"
        status_file.write_text(" M a.py\n")
        output = tmp_path / "msg.txt"

        with patch("commitgen.__main__.CommitGen") as mock_commit_gen:
            mock_commit_gen.return_value = mock_app
            result = runner.invoke(
                main,
                [
                    "-y", "-t", "fix", "--footer", "-i", "12", "--max-files-in-body", "5",
                    "--status-file", str(status_file), "-o", str(output), "-p", "-c", "-d",
                ],
            )

            assert result.exit_code == 0
            mock_commit_gen.assert_called_once_with(
                Config(max_files_in_body=5, include_footer=True)
            )
            mock_app.run.assert_called_once_with(
                status=" M a.py\n",
                commit_type="fix",
                auto_accept=True,
                issue="12",
                output=output,
                print_only=True,
                commit=True,
                debug=True,
            )

    def test_status_from_stdin(self, runner):
        """Test a full run fed from stdin."""
        result = runner.invoke(
            main, ["--status-file", "-", "-t", "feat", "-p"], input="A  src/auth/Login.tsx\n"
        )

        assert result.exit_code == 0
        assert "feat(src): add Login" in result.output

    def test_invalid_max_files(self, runner):
        result = runner.invoke(main, ["--max-files-in-body", "0"])
        assert result.exit_code == 2

    def test_issue_with_no_footer_rejected(self, runner):
        """Test an issue number cannot be combined with --no-footer."""
        with patch("commitgen.__main__.CommitGen") as mock_commit_gen:
            result = runner.invoke(main, ["--no-footer", "-i", "12"])

            assert result.exit_code == 2
            assert "--issue cannot be combined with --no-footer" in result.output
            mock_commit_gen.assert_not_called()


class TestCliErrors:
    """Test CLI error handling."""

    def test_keyboard_interrupt(self, runner, mock_app):
        """Test handling of keyboard interrupt."""
        with patch("commitgen.__main__.CommitGen") as mock_commit_gen:
            mock_commit_gen.return_value = mock_app
            mock_app.run.side_effect = KeyboardInterrupt()

            result = runner.invoke(main)

            assert result.exit_code == 1
            assert "Operation cancelled by user" in result.output

    def test_general_error(self, runner, mock_app):
        """Test handling of general errors."""
        with patch("commitgen.__main__.CommitGen") as mock_commit_gen:
            mock_commit_gen.return_value = mock_app
            mock_app.run.side_effect = Exception("Test error")

            result = runner.invoke(main)

            assert result.exit_code == 1
            assert "Test error" in result.output

    def test_invalid_configuration(self, runner, monkeypatch):
        """Test bad environment values are reported."""
        monkeypatch.setenv("COMMITGEN_INCLUDE_FOOTER", "sometimes")

        result = runner.invoke(main)

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
