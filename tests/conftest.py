"""
Shared pytest configuration for the dirnotes test suite.

Every test gets its own database file and its own working directory so that
notes never leak between tests or into the real ~/dev/notes database:

    • `db_path`      a fresh database location under tmp_path, exported
                     through DIRNOTES_DB_PATH
    • `work_dir`     a directory the test has chdir'd into
    • `store`        an open NoteStore on `db_path`
    • `cli_runner`   a Typer CliRunner
"""

import pytest
from typer.testing import CliRunner

from dirnotes.config import DB_PATH_ENV_VAR
from dirnotes.store import NoteStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the CLI at a per-test database file."""
    path = tmp_path / "db" / "notes.db"
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(path))
    return path


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """Run the test from inside a dedicated directory."""
    path = tmp_path / "project"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def store(db_path):
    """An open store with the schema in place, closed after the test."""
    with NoteStore.open(db_path) as note_store:
        yield note_store
