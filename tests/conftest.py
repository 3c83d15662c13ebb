"""Common test fixtures."""

import pytest

from commitgen.core.status import ChangeSet


@pytest.fixture
def make_changes():
    """Fixture for creating ChangeSet instances from lists."""
    def _create_changes(**categories: list[str]) -> ChangeSet:
        return ChangeSet(**{name: tuple(paths) for name, paths in categories.items()})
    return _create_changes


@pytest.fixture
def pick():
    """Fixture for a type chooser that always answers the same label."""
    def _chooser_for(label: str | None):
        return lambda options: label
    return _chooser_for


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep commitgen settings and any local .env out of the tests."""
    monkeypatch.delenv("COMMITGEN_MAX_FILES_IN_BODY", raising=False)
    monkeypatch.delenv("COMMITGEN_INCLUDE_FOOTER", raising=False)
    monkeypatch.chdir(tmp_path)
