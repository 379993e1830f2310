"""Test configuration and fixtures for dirwalk."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirwalk.logging_setup import configure_logging


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True, scope="session")
def structured_logging():
    """Route structlog events through stdlib logging so caplog can see them."""
    configure_logging("warning")


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/a.txt and root/b/c.txt."""
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "c.txt").write_text("c")
    return tmp_path


@pytest.fixture
def deep_tree(tmp_path):
    """Create a tree with directories nested three levels deep and some siblings."""
    (tmp_path / "top.txt").touch()
    (tmp_path / "one").mkdir()
    (tmp_path / "one" / "one.txt").touch()
    (tmp_path / "one" / "two").mkdir()
    (tmp_path / "one" / "two" / "two.txt").touch()
    (tmp_path / "one" / "two" / "three").mkdir()
    (tmp_path / "one" / "two" / "three" / "three.txt").touch()
    (tmp_path / "other").mkdir()
    (tmp_path / "other" / "other.txt").touch()
    (tmp_path / "empty").mkdir()
    return tmp_path


@pytest.fixture
def deny_listing():
    """Make os.scandir fail with PermissionError for the given directories.

    Tests usually run with enough privileges to read any directory, so an
    unreadable directory is simulated instead of created with chmod.
    """
    real_scandir = os.scandir

    def install(*denied: Path):
        denied_paths = {os.fspath(path) for path in denied}

        def scandir(path):
            if os.fsdecode(path) in denied_paths:
                raise PermissionError(13, "Permission denied", os.fsdecode(path))
            return real_scandir(path)

        return patch("dirwalk.walker.walker.os.scandir", side_effect=scandir)

    return install
