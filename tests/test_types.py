"""Unit tests for the shared enums."""

from dirwalk.types import EntryKind, ResultKind


def test_entry_kind_values():
    assert EntryKind.FILE == "file"
    assert EntryKind.DIRECTORY == "directory"
    assert EntryKind.SYMLINK == "symlink"
    assert EntryKind("character_device") is EntryKind.CHARACTER_DEVICE
    assert len(EntryKind) == 8


def test_result_kind_values():
    assert ResultKind.ENTRY == "entry"
    assert ResultKind.ERROR == "error"
    assert ResultKind("error") is ResultKind.ERROR
