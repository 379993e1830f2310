"""Unit tests for the plain text output strategy."""

import pytest

from dirwalk.output_strategies.text_strategy import TextOutputStrategy
from dirwalk.types import EntryKind
from dirwalk.walker import Entry, WalkError


@pytest.fixture
def strategy():
    return TextOutputStrategy("/srv/data")


def test_format_file(strategy):
    assert strategy.format_entry(Entry(0, "/srv/data/a.txt", "a.txt", EntryKind.FILE)) == "a.txt\n"


def test_format_directory_is_indented_by_depth(strategy):
    assert strategy.format_entry(Entry(2, "/srv/data/x/y/z", "z", EntryKind.DIRECTORY)) == "    z/\n"


@pytest.mark.parametrize(
    "kind, marker",
    [
        (EntryKind.SYMLINK, " [symlink]"),
        (EntryKind.FIFO, " [fifo]"),
        (EntryKind.SOCKET, " [socket]"),
        (EntryKind.BLOCK_DEVICE, " [block_device]"),
        (EntryKind.UNKNOWN, " [unknown]"),
    ],
)
def test_format_special_kinds(strategy, kind, marker):
    assert strategy.format_entry(Entry(0, "/srv/data/n", "n", kind)) == f"n{marker}\n"


def test_format_error(strategy):
    error = WalkError(depth=1, path="/srv/data/locked", error=PermissionError(13, "Permission denied"))
    assert strategy.format_error(error) == '  ! Failed to walk path "/srv/data/locked": Permission denied\n'


def test_format_end_is_empty(strategy):
    assert strategy.format_end() == ""
