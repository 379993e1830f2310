"""Error action enum for handling unreadable directories in the CLI."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when the walk reports a directory it could not list.

    Values:
        IGNORE: Only include the failure in the output (default behavior)
        WARN: Also print a warning to stderr and continue
        FAIL: Print an error to stderr and stop the walk
    """

    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"
