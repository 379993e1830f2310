"""Plain text output strategy, one line per walk result."""

from dirwalk.types import EntryKind
from dirwalk.walker import Entry, WalkError

from .base_strategy import OutputStrategy

INDENT = "  "


class TextOutputStrategy(OutputStrategy):
    """Output strategy that writes each result on its own line, indented by depth.

    Directories get a trailing ``/``. Symlinks and other non-regular kinds get a
    bracketed marker. Failed directories are written as ``!`` lines one level
    below the directory's own entry.

    Example:
        >>> from dirwalk.types import EntryKind
        >>> strategy = TextOutputStrategy("/srv/data")
        >>> strategy.format_entry(Entry(0, "/srv/data/b", "b", EntryKind.DIRECTORY))
        'b/\\n'
        >>> strategy.format_entry(Entry(1, "/srv/data/b/link", "link", EntryKind.SYMLINK))
        '  link [symlink]\\n'
    """

    def format_entry(self, entry: Entry) -> str:
        suffix = ""
        if entry.kind is EntryKind.DIRECTORY:
            suffix = "/"
        elif entry.kind is not EntryKind.FILE:
            suffix = f" [{entry.kind.value}]"
        return f"{INDENT * entry.depth}{entry.name}{suffix}\n"

    def format_error(self, error: WalkError) -> str:
        return f"{INDENT * error.depth}! {error.message}: {error.cause_message}\n"
