"""Value type for a successfully listed filesystem node."""

from dataclasses import dataclass

from dirwalk.types import EntryKind, ResultKind


@dataclass(frozen=True)
class Entry:
    """A filesystem node discovered while walking a directory.

    Entries are created once per child returned by a directory listing and are
    never modified afterwards. The node type is captured at listing time, so
    the kind predicates never touch the filesystem.

    Attributes:
        depth (int): Recursion level at which the node was found. Direct children
            of the root have depth 0.
        path (str): Absolute path of the node, the parent directory path joined
            with ``name``.
        name (str): Base name of the node as reported by the listing.
        kind (EntryKind): Node type reported by the listing.

    Example:
        >>> entry = Entry(depth=0, path="/srv/data/a.txt", name="a.txt", kind=EntryKind.FILE)
        >>> entry.is_file()
        True
        >>> entry.is_dir()
        False
        >>> entry.result_kind
        <ResultKind.ENTRY: 'entry'>
    """

    depth: int
    path: str
    name: str
    kind: EntryKind

    @property
    def result_kind(self) -> ResultKind:
        return ResultKind.ENTRY

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    def is_block_device(self) -> bool:
        return self.kind is EntryKind.BLOCK_DEVICE

    def is_char_device(self) -> bool:
        return self.kind is EntryKind.CHARACTER_DEVICE

    def is_fifo(self) -> bool:
        return self.kind is EntryKind.FIFO

    def is_socket(self) -> bool:
        return self.kind is EntryKind.SOCKET
