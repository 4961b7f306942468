"""
Shared pytest configuration for the notekeeper test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one CliRunner setup
    • Storage tests can run against a real SQLite file in tmp_path
    • Contract tests run unchanged against every storage backend

All helpers here are deterministic and never touch the working directory.
"""

import logging

import pytest
from typer.testing import CliRunner

from notekeeper.storage import InMemoryStorage, SQLiteStorage


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any `--verbose` level change so tests stay independent."""
    yield
    logging.getLogger("notekeeper").setLevel(logging.WARNING)


# ============================================================================
# STORAGE FIXTURES
# ============================================================================


@pytest.fixture
def db_path(tmp_path) -> str:
    """Path to a not-yet-created database file inside tmp_path."""
    return str(tmp_path / "notes.db")


@pytest.fixture
def sqlite_storage(db_path):
    """An open SQLiteStorage, closed after the test."""
    storage = SQLiteStorage(db_path)
    yield storage
    storage.close()


@pytest.fixture
def memory_storage():
    """An open InMemoryStorage, closed after the test."""
    storage = InMemoryStorage()
    yield storage
    storage.close()


# ---------------------------------------------------------------------------
# Fixture: storage
# ---------------------------------------------------------------------------
# Parametrised over every backend so contract tests prove that the backends
# are interchangeable behind the NoteStorage Protocol.
# ---------------------------------------------------------------------------
@pytest.fixture(params=["sqlite", "memory"])
def storage(request):
    return request.getfixturevalue(f"{request.param}_storage")
