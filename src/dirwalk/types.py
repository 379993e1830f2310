from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Enumeration of node types reported by a directory listing.

    Symbolic links are always classified as SYMLINK, whatever they point to.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        BLOCK_DEVICE: Block special device
        CHARACTER_DEVICE: Character special device
        FIFO: Named pipe
        SOCKET: Unix domain socket
        UNKNOWN: Type information could not be obtained
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHARACTER_DEVICE = "character_device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"


class ResultKind(str, Enum):
    """Tag discriminating the two kinds of values yielded by a walk.

    Values:
        ENTRY: A successfully listed filesystem node
        ERROR: A directory that could not be listed
    """

    ENTRY = "entry"
    ERROR = "error"
