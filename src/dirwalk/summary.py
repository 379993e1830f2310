"""Aggregate counts over a walk."""

from collections import Counter
from typing import Dict, Iterable, Iterator, List

from dirwalk.types import EntryKind
from dirwalk.walker import Entry, WalkError, WalkResult

_OTHER_KINDS = (
    EntryKind.BLOCK_DEVICE,
    EntryKind.CHARACTER_DEVICE,
    EntryKind.FIFO,
    EntryKind.SOCKET,
    EntryKind.UNKNOWN,
)


class WalkSummary:
    """Running totals for the results of a walk.

    A summary can be filled from a finished sequence with ``from_results`` or
    alongside another consumer with ``consume``, which passes every result
    through unchanged.

    Attributes:
        kind_counts (Counter): Number of entries per EntryKind.
        errors (list[WalkError]): Every WalkError seen, in order.
        max_depth (int): Greatest entry depth seen, or -1 if no entry was seen.

    Example:
        >>> summary = WalkSummary.from_results(walk("/srv/data"))  # doctest: +SKIP
        >>> summary.file_count, summary.directory_count, summary.error_count  # doctest: +SKIP
        (42, 5, 0)
    """

    def __init__(self) -> None:
        self.kind_counts: Counter[EntryKind] = Counter()
        self.errors: List[WalkError] = []
        self.max_depth = -1

    @classmethod
    def from_results(cls, results: Iterable[WalkResult]) -> "WalkSummary":
        summary = cls()
        for result in summary.consume(results):
            pass
        return summary

    def add(self, result: WalkResult) -> None:
        """Record one walk result.

        Raises:
            TypeError: If result is neither an Entry nor a WalkError.
        """
        if isinstance(result, WalkError):
            self.errors.append(result)
        elif isinstance(result, Entry):
            self.kind_counts[result.kind] += 1
            if result.depth > self.max_depth:
                self.max_depth = result.depth
        else:
            raise TypeError(f"Expected Entry or WalkError, got {type(result).__name__}")

    def consume(self, results: Iterable[WalkResult]) -> Iterator[WalkResult]:
        """Yield every result from results, recording each one first."""
        for result in results:
            self.add(result)
            yield result

    @property
    def file_count(self) -> int:
        return self.kind_counts[EntryKind.FILE]

    @property
    def directory_count(self) -> int:
        return self.kind_counts[EntryKind.DIRECTORY]

    @property
    def symlink_count(self) -> int:
        return self.kind_counts[EntryKind.SYMLINK]

    @property
    def other_count(self) -> int:
        return sum(self.kind_counts[kind] for kind in _OTHER_KINDS)

    @property
    def entry_count(self) -> int:
        return sum(self.kind_counts.values())

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def as_dict(self) -> Dict[str, int]:
        return {
            "directories": self.directory_count,
            "files": self.file_count,
            "symlinks": self.symlink_count,
            "other": self.other_count,
            "errors": self.error_count,
            "max_depth": self.max_depth,
        }
