"""Lazy, depth-bounded recursive directory traversal.

This package provides a generator-based directory walker that yields one
descriptor per filesystem node, annotated with its depth and absolute path.
Failures to list a directory are reported as values in the stream instead of
aborting the traversal.
"""

from importlib.metadata import PackageNotFoundError, version

from dirwalk.exceptions import (
    DirWalkConfigError,
    InvalidDepthLimitError,
    InvalidEncodingError,
    InvalidRootPathError,
)
from dirwalk.summary import WalkSummary
from dirwalk.types import EntryKind, ResultKind
from dirwalk.walker import Entry, WalkError, WalkOptions, WalkResult, walk, walk_options

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirwalk")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirWalkConfigError",
    "Entry",
    "EntryKind",
    "InvalidDepthLimitError",
    "InvalidEncodingError",
    "InvalidRootPathError",
    "ResultKind",
    "WalkError",
    "WalkOptions",
    "WalkResult",
    "WalkSummary",
    "walk",
    "walk_options",
    "__version__",
]
