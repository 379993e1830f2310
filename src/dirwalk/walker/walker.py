"""Depth-first, generator-based directory traversal.

This module provides the walk functions. A walk lists one directory at a time
with ``os.scandir``, yields an Entry for each child in the order the operating
system returns them, and descends into each child directory before moving on to
the next sibling. A directory that cannot be listed produces a single WalkError
and the walk carries on with the rest of the tree.
"""

import logging
import os
import stat
import sys
from typing import AnyStr, Iterator, List, Optional, Tuple, Union

import structlog

from dirwalk.types import EntryKind, PathType
from dirwalk.walker.entry import Entry
from dirwalk.walker.options import WalkOptions
from dirwalk.walker.walk_error import WalkError

# Events go through the stdlib logger, which drops them until logging is configured
log = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

WalkResult = Union[Entry, WalkError]

# Mode tests for the kinds os.DirEntry has no dedicated predicate for
_SPECIAL_KINDS = (
    (stat.S_ISBLK, EntryKind.BLOCK_DEVICE),
    (stat.S_ISCHR, EntryKind.CHARACTER_DEVICE),
    (stat.S_ISFIFO, EntryKind.FIFO),
    (stat.S_ISSOCK, EntryKind.SOCKET),
)


def walk(
    root_path: PathType,
    depth_limit: Optional[int] = None,
    *,
    encoding: Optional[str] = None,
) -> Iterator[WalkResult]:
    """Recursively walk a directory, yielding its entries and listing failures.

    Arguments are validated immediately, before the iterator is returned; the
    traversal itself is lazy and each directory is listed only when the consumer
    asks for the next result. The returned iterator is single-pass: call ``walk``
    again to traverse a second time.

    Args:
        root_path: Directory to start from. A path string, an ``os.PathLike``
            object or a ``file://`` URL string.
        depth_limit: Deepest level whose directories are still listed. ``0`` yields
            only the root's immediate children. ``None`` means no limit.
        encoding: Codec used to decode child names and the root they are
            joined onto, or ``None`` for the filesystem encoding. Directories
            are always re-listed by their on-disk names.

    Returns:
        An iterator over Entry and WalkError values in pre-order.

    Raises:
        InvalidRootPathError: If the root is not a supported location form.
        InvalidDepthLimitError: If the depth limit is negative or not an int.
        InvalidEncodingError: If the encoding is not a known codec.

    Example:
        >>> for result in walk("/srv/data", depth_limit=1):  # doctest: +SKIP
        ...     if isinstance(result, WalkError):
        ...         print("skipped", result.path)
        ...     else:
        ...         print(result.depth, result.path)
        0 /srv/data/a.txt
        0 /srv/data/b
        1 /srv/data/b/c.txt
    """
    return walk_options(WalkOptions(root_path, depth_limit=depth_limit, encoding=encoding))


def walk_options(options: WalkOptions) -> Iterator[WalkResult]:
    """Walk using a WalkOptions object. See ``walk`` for the semantics.

    Raises:
        InvalidRootPathError: If the root is not a supported location form.
        InvalidDepthLimitError: If the depth limit is negative or not an int.
        InvalidEncodingError: If the encoding is not a known codec.
    """
    root = options.validate()
    log.debug("walk_started", root=root, depth_limit=options.depth_limit, encoding=options.encoding)
    if options.encoding is None:
        return _walk_directory(root, root, 0, options.depth_limit, None)

    # Listings run on the raw bytes; only the yielded paths are decoded
    return _walk_directory(options.reported_root(), os.fsencode(root), 0, options.depth_limit, options.encoding)


def _walk_directory(
    current_path: str,
    disk_path: AnyStr,
    current_depth: int,
    depth_limit: Optional[int],
    encoding: Optional[str],
) -> Iterator[WalkResult]:
    """Yield the subtree below current_path.

    current_path is the path as reported to the consumer, disk_path the same
    directory as the operating system knows it. They differ only when a
    non-default encoding is in use, in which case disk_path is bytes.

    Recursion goes through nested generators, so the interpreter stack grows with
    the traversal depth. Trees deeper than ``sys.getrecursionlimit()`` raise
    RecursionError; pass a depth_limit when walking untrusted trees.
    """
    try:
        children = _list_directory(disk_path)
    except Exception as e:
        log.debug("walk_error", path=current_path, depth=current_depth, error=repr(e))
        yield WalkError(depth=current_depth, path=current_path, error=e)
        return

    for raw_name, kind in children:
        name = _decode_name(raw_name, encoding)
        path = os.path.join(current_path, name)
        yield Entry(depth=current_depth, path=path, name=name, kind=kind)

        if kind is EntryKind.DIRECTORY and (depth_limit is None or current_depth < depth_limit):
            yield from _walk_directory(
                path, os.path.join(disk_path, raw_name), current_depth + 1, depth_limit, encoding
            )


def _list_directory(path: AnyStr) -> List[Tuple[AnyStr, EntryKind]]:
    """List the direct children of path with their kinds.

    The scandir handle is exhausted and closed before returning so no file
    descriptor stays open while the caller is suspended at a yield.
    """
    with os.scandir(path) as it:
        return [(dir_entry.name, _classify(dir_entry)) for dir_entry in it]


def _decode_name(raw_name: Union[str, bytes], encoding: Optional[str]) -> str:
    if isinstance(raw_name, bytes):
        return raw_name.decode(encoding or sys.getfilesystemencoding(), "surrogateescape")
    return raw_name


def _classify(dir_entry: Union["os.DirEntry[str]", "os.DirEntry[bytes]"]) -> EntryKind:
    """Map a scandir entry to an EntryKind without following symlinks."""
    try:
        if dir_entry.is_symlink():
            return EntryKind.SYMLINK
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        mode = dir_entry.stat(follow_symlinks=False).st_mode
    except OSError:
        # The node vanished or became unreadable between listing and lookup
        return EntryKind.UNKNOWN

    for predicate, kind in _SPECIAL_KINDS:
        if predicate(mode):
            return kind
    return EntryKind.UNKNOWN
