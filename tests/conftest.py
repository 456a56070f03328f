"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todosh.config import Config, CONFIG_ENV_VAR  # noqa: E402
from todosh.storage import CsvStore  # noqa: E402


SAMPLE_DB = """ID, TASK, COMPLETED
1, Take out trash, false
2, Cook dinner, false
3, Learn rust, true
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at an empty temp location for every test."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "config" / "config.yaml"))
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def sample_db(tmp_path):
    """A database file holding the three example todos."""
    path = tmp_path / "db.csv"
    path.write_text(SAMPLE_DB, encoding="utf-8")
    return path


@pytest.fixture
def empty_db(tmp_path):
    """A database file holding only the header row."""
    path = tmp_path / "empty.csv"
    path.write_text("ID, TASK, COMPLETED\n", encoding="utf-8")
    return path


@pytest.fixture
def store(sample_db):
    return CsvStore(sample_db)
