"""Walk configuration and root path normalization."""

import codecs
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

from dirwalk.exceptions import InvalidDepthLimitError, InvalidEncodingError, InvalidRootPathError
from dirwalk.types import PathType

_LOCAL_HOSTS = ("", "localhost")


@dataclass(frozen=True)
class WalkOptions:
    """Configuration for a single walk.

    Attributes:
        root_path: Directory to start from. A path string, an ``os.PathLike``
            object or a ``file://`` URL string.
        depth_limit: Deepest level whose directories are still listed. ``0`` lists
            only the root. ``None`` means no limit.
        encoding: Codec used to decode child names. When ``None`` the listing
            uses the filesystem encoding; otherwise each directory is listed in
            bytes mode and names are decoded with this codec.

    Example:
        >>> options = WalkOptions("/srv/data", depth_limit=2)
        >>> options.depth_limit
        2
    """

    root_path: PathType
    depth_limit: Optional[int] = None
    encoding: Optional[str] = None

    def validate(self) -> str:
        """Check every option and return the normalized absolute root path.

        Returns:
            The root path as an absolute, normalized string.

        Raises:
            InvalidRootPathError: If the root is not a supported location form.
            InvalidDepthLimitError: If the depth limit is not None or a non-negative int.
            InvalidEncodingError: If the encoding is not a known codec.
        """
        validate_depth_limit(self.depth_limit)
        if self.encoding is not None:
            validate_encoding(self.encoding)
        return normalize_root_path(self.root_path)

    def reported_root(self) -> str:
        """Validate the options and return the root as it prefixes every yielded path.

        With an encoding set, the root's on-disk bytes are decoded with that codec
        so the root and the child names below it share one decoding.
        """
        root = self.validate()
        if self.encoding is None:
            return root
        return os.fsencode(root).decode(self.encoding, "surrogateescape")


def normalize_root_path(root_path: object) -> str:
    """Turn a caller-supplied root into an absolute, normalized path string.

    Args:
        root_path: A path string, an ``os.PathLike`` object or a ``file://`` URL string.

    Returns:
        The absolute path with redundant separators and up-level references removed.

    Raises:
        InvalidRootPathError: If the value is of another type, empty, a URL with a
            scheme other than ``file``, or a ``file`` URL naming a remote host.

    Example:
        >>> normalize_root_path("file:///srv/data/")
        '/srv/data'
        >>> normalize_root_path("/srv//data/../logs")
        '/srv/logs'
    """
    if isinstance(root_path, os.PathLike):
        fs_path = os.fspath(root_path)
        if not isinstance(fs_path, str):
            raise InvalidRootPathError(root_path, "Bytes paths are not supported as root path")
        path = fs_path
    elif isinstance(root_path, str):
        path = _url_to_path(root_path) if _is_url(root_path) else root_path
    else:
        raise InvalidRootPathError(root_path)

    if not path:
        raise InvalidRootPathError(root_path, "Root path must not be empty")
    return os.path.abspath(path)


def validate_depth_limit(depth_limit: object) -> None:
    """Reject anything but None or a non-negative int (bool excluded)."""
    if depth_limit is None:
        return
    if isinstance(depth_limit, bool) or not isinstance(depth_limit, int) or depth_limit < 0:
        raise InvalidDepthLimitError(depth_limit)


def validate_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise InvalidEncodingError(str(encoding)) from e


def _is_url(value: str) -> bool:
    # Windows drive letters ("C:\\data") parse as a one-letter scheme
    scheme = urlparse(value).scheme
    return (len(scheme) > 1 and "://" in value) or scheme == "file"


def _url_to_path(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme != "file":
        raise InvalidRootPathError(url, f"Only file:// URLs are supported as root path, got {parsed.scheme}://")
    if parsed.netloc not in _LOCAL_HOSTS:
        raise InvalidRootPathError(url, f"File URL must point to the local host, got {parsed.netloc!r}")
    return url2pathname(parsed.path)
