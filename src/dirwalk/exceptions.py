class DirWalkConfigError(Exception):
    """
    Base class for errors in the configuration of a walk.

    Configuration errors are raised synchronously by ``walk()`` before any
    result is produced. They are the only errors that stop a traversal; failures
    to list individual directories are yielded as ``WalkError`` values instead.
    """

    pass


class InvalidRootPathError(DirWalkConfigError, TypeError):
    """
    Exception raised when the root of a walk is not a usable location.

    Accepted forms are a path string, an ``os.PathLike`` object or a ``file://``
    URL string.

    Attributes:
        root_path: The rejected value.

    Example:
        >>> error = InvalidRootPathError(42)
        >>> str(error)
        'Expected a path string, os.PathLike or file:// URL as root path, got int'
    """

    def __init__(self, root_path: object, reason: str = "") -> None:
        """
        Initialize the exception with the rejected root value.

        Args:
            root_path: The value that could not be used as a root.
            reason: Optional detail replacing the default type message.
        """
        self.root_path = root_path
        message = reason or (
            "Expected a path string, os.PathLike or file:// URL as root path, " f"got {type(root_path).__name__}"
        )
        super().__init__(message)


class InvalidDepthLimitError(DirWalkConfigError, ValueError):
    """
    Exception raised when the depth limit is not None or a non-negative integer.

    Example:
        >>> str(InvalidDepthLimitError(-1))
        'Depth limit must be a non-negative integer or None, got -1'
    """

    def __init__(self, depth_limit: object) -> None:
        self.depth_limit = depth_limit
        super().__init__(f"Depth limit must be a non-negative integer or None, got {depth_limit!r}")


class InvalidEncodingError(DirWalkConfigError, LookupError):
    """
    Exception raised when the listing encoding is not a known codec.

    Example:
        >>> str(InvalidEncodingError("no-such-codec"))
        'Unknown encoding for directory listing: no-such-codec'
    """

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unknown encoding for directory listing: {encoding}")
