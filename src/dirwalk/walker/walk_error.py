"""Value type for a directory that could not be listed."""

from typing import Any, NoReturn, Optional

from dirwalk.types import ResultKind


class WalkError(Exception):
    """A failure to list the contents of one directory.

    WalkError is yielded by the walker in place of the failed directory's
    children; it is never raised by the walker itself. It derives from Exception
    so that consumers who prefer to stop on the first failure can simply raise it,
    with the original failure chained as ``__cause__``.

    The wrapped ``error`` is whatever the listing call raised. Consumers must not
    assume it is an OSError; ``os_error`` and ``errno`` give a typed view when it is.

    Attributes:
        depth (int): Recursion level of the directory whose listing failed.
        path (str): Absolute path of the directory whose listing failed.
        error (BaseException): The original failure.

    Example:
        >>> failure = WalkError(depth=1, path="/srv/data/locked", error=PermissionError(13, "Permission denied"))
        >>> str(failure)
        'Failed to walk path "/srv/data/locked"'
        >>> failure.errno
        13
    """

    _depth: int
    _path: str
    _error: BaseException

    def __init__(self, depth: int, path: str, error: BaseException) -> None:
        super().__init__(f'Failed to walk path "{path}"')
        object.__setattr__(self, "_depth", depth)
        object.__setattr__(self, "_path", path)
        object.__setattr__(self, "_error", error)
        self.__cause__ = error

    def __setattr__(self, name: str, value: Any) -> None:
        # Exception machinery assigns the dunder traceback/context attributes
        if name.startswith("__") and name.endswith("__"):
            super().__setattr__(name, value)
            return
        raise AttributeError(f"WalkError is immutable, cannot set {name!r}")

    def __reduce__(self) -> Any:
        return (type(self), (self.depth, self.path, self.error))

    def __repr__(self) -> str:
        return f"WalkError(depth={self.depth}, path={self.path!r}, error={self.error!r})"

    @property
    def result_kind(self) -> ResultKind:
        return ResultKind.ERROR

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def path(self) -> str:
        return self._path

    @property
    def error(self) -> BaseException:
        return self._error

    @property
    def message(self) -> str:
        return str(self)

    @property
    def cause_message(self) -> str:
        """A one-line description of the wrapped failure."""
        os_error = self.os_error
        if os_error is not None and os_error.strerror:
            return os_error.strerror
        return str(self._error) or type(self._error).__name__

    @property
    def os_error(self) -> Optional[OSError]:
        """The wrapped failure if it came from the operating system, otherwise None."""
        if isinstance(self._error, OSError):
            return self._error
        return None

    @property
    def errno(self) -> Optional[int]:
        """The OS error number of the wrapped failure, or None if unavailable."""
        os_error = self.os_error
        return os_error.errno if os_error is not None else None

    def reraise(self) -> NoReturn:
        """Raise this WalkError, chained to its original failure."""
        raise self from self._error
