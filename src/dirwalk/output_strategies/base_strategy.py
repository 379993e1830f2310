"""Output strategy base class defining the interface for walk result formatting.

This module provides the abstract base class that defines how walk results are
turned into output text. Strategies may emit text per result or buffer results
and emit everything from ``format_end``.
"""

from abc import ABC, abstractmethod

from dirwalk.walker import Entry, WalkError


class OutputStrategy(ABC):
    """Abstract base class for formatting walk results.

    This class implements the Strategy pattern for rendering the stream produced by
    ``walk`` in different formats (plain text, JSON Lines, tree). The output process
    has two phases:
    1. Per result - ``format_entry`` or ``format_error`` is called for each yielded value
    2. End - ``format_end`` is called once after the walk is exhausted

    Each method returns the text to write, which may be empty.

    Attributes:
        root_path (str): Absolute root of the walk being formatted.

    Example:
        >>> class NamesOnly(OutputStrategy):
        ...     def format_entry(self, entry: Entry) -> str:
        ...         return entry.name + "\\n"
        ...
        ...     def format_error(self, error: WalkError) -> str:
        ...         return ""
    """

    def __init__(self, root_path: str) -> None:
        self.root_path = root_path

    @abstractmethod
    def format_entry(self, entry: Entry) -> str:
        """Format one successfully listed node.

        Args:
            entry: The entry yielded by the walk.

        Returns:
            The formatted text for this entry.
        """
        pass

    @abstractmethod
    def format_error(self, error: WalkError) -> str:
        """Format one directory listing failure.

        Args:
            error: The WalkError yielded by the walk.

        Returns:
            The formatted text for this failure.
        """
        pass

    def format_end(self) -> str:
        """Format anything that must follow the last result.

        Returns:
            Trailing text, empty by default.
        """
        return ""
