"""JSON Lines output strategy for walk results.

This module provides a strategy for formatting each walk result as one JSON
object per line, so the output can be streamed and parsed incrementally.
"""

import json

from dirwalk.types import ResultKind
from dirwalk.walker import Entry, WalkError

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats each walk result as a JSON object on its own line.

    Entries are formatted as:
    {"type": "entry", "kind": "file", "depth": 0, "path": "/abs/path", "name": "path"}

    Listing failures are formatted as:
    {"type": "error", "depth": 1, "path": "/abs/dir", "message": "...", "cause": "...", "errno": 13}

    ``errno`` is null when the failure did not come from the operating system.

    Attributes:
        encoder: JSON encoder instance used for consistent escaping.

    Example:
        >>> from dirwalk.types import EntryKind
        >>> strategy = JSONOutputStrategy("/srv")
        >>> strategy.format_entry(Entry(0, "/srv/a.txt", "a.txt", EntryKind.FILE))
        '{"type": "entry", "kind": "file", "depth": 0, "path": "/srv/a.txt", "name": "a.txt"}\\n'
    """

    def __init__(self, root_path: str) -> None:
        super().__init__(root_path)
        self.encoder = json.JSONEncoder()

    def format_entry(self, entry: Entry) -> str:
        data = {
            "type": ResultKind.ENTRY.value,
            "kind": entry.kind.value,
            "depth": entry.depth,
            "path": entry.path,
            "name": entry.name,
        }
        return self.encoder.encode(data) + "\n"

    def format_error(self, error: WalkError) -> str:
        data = {
            "type": ResultKind.ERROR.value,
            "depth": error.depth,
            "path": error.path,
            "message": error.message,
            "cause": error.cause_message,
            "errno": error.errno,
        }
        return self.encoder.encode(data) + "\n"
