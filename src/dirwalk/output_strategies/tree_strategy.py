"""Tree output strategy rendering the walk like the Unix ``tree`` command."""

import os
from typing import Dict

from anytree import ContStyle, RenderTree

from dirwalk.types import EntryKind
from dirwalk.walker import Entry, WalkError

from .base_strategy import OutputStrategy
from .walk_node import WalkNode


class TreeOutputStrategy(OutputStrategy):
    """Output strategy that collects the walk into a tree and renders it at the end.

    Unlike the line-based strategies this one buffers every result, because the
    connector drawn in front of a node depends on whether it has later siblings.
    Children keep the order in which the walk produced them.

    Example:
        >>> strategy = TreeOutputStrategy("/srv/data")
        >>> _ = strategy.format_entry(Entry(0, "/srv/data/a.txt", "a.txt", EntryKind.FILE))
        >>> _ = strategy.format_entry(Entry(0, "/srv/data/b", "b", EntryKind.DIRECTORY))
        >>> _ = strategy.format_entry(Entry(1, "/srv/data/b/c.txt", "c.txt", EntryKind.FILE))
        >>> print(strategy.format_end(), end="")
        data/
        ├── a.txt
        └── b/
            └── c.txt
    """

    def __init__(self, root_path: str) -> None:
        super().__init__(root_path)
        root_name = os.path.basename(root_path) or root_path
        self.root = WalkNode(root_name, kind=EntryKind.DIRECTORY)
        self._nodes: Dict[str, WalkNode] = {root_path: self.root}

    def format_entry(self, entry: Entry) -> str:
        parent = self._nodes.get(os.path.dirname(entry.path), self.root)
        node = WalkNode(entry.name, parent=parent, kind=entry.kind)
        if entry.is_dir():
            self._nodes[entry.path] = node
        return ""

    def format_error(self, error: WalkError) -> str:
        node = self._nodes.get(error.path)
        if node is None:
            # Only directories are listed, so this is a directory we have not seen
            node = WalkNode(os.path.basename(error.path), parent=self.root, kind=EntryKind.DIRECTORY)
            self._nodes[error.path] = node
        node.error = error.cause_message
        return ""

    def format_end(self) -> str:
        lines = [f"{pre}{node.label}" for pre, _, node in RenderTree(self.root, style=ContStyle())]
        return "\n".join(lines) + "\n"
