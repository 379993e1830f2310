"""Unit tests for the Entry value type."""

import dataclasses

import pytest

from dirwalk.types import EntryKind, ResultKind
from dirwalk.walker.entry import Entry

PREDICATES = {
    EntryKind.FILE: "is_file",
    EntryKind.DIRECTORY: "is_dir",
    EntryKind.SYMLINK: "is_symlink",
    EntryKind.BLOCK_DEVICE: "is_block_device",
    EntryKind.CHARACTER_DEVICE: "is_char_device",
    EntryKind.FIFO: "is_fifo",
    EntryKind.SOCKET: "is_socket",
}


@pytest.mark.parametrize("kind", list(EntryKind))
def test_exactly_one_predicate_matches_kind(kind):
    entry = Entry(depth=0, path="/srv/node", name="node", kind=kind)

    matching = [name for name in PREDICATES.values() if getattr(entry, name)()]

    if kind is EntryKind.UNKNOWN:
        assert matching == []
    else:
        assert matching == [PREDICATES[kind]]


def test_entry_attributes():
    entry = Entry(depth=2, path="/srv/data/x/y/z.txt", name="z.txt", kind=EntryKind.FILE)
    assert entry.depth == 2
    assert entry.path == "/srv/data/x/y/z.txt"
    assert entry.name == "z.txt"
    assert entry.result_kind is ResultKind.ENTRY


def test_entry_is_immutable():
    entry = Entry(depth=0, path="/srv/a", name="a", kind=EntryKind.FILE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.depth = 1  # type: ignore[misc]


def test_entry_equality_and_hash():
    first = Entry(0, "/srv/a", "a", EntryKind.FILE)
    second = Entry(0, "/srv/a", "a", EntryKind.FILE)
    assert first == second
    assert len({first, second}) == 1
    assert first != Entry(1, "/srv/a", "a", EntryKind.FILE)
