"""Node representation for walk results collected into a tree."""

from typing import Any, Optional

from anytree import Node

from dirwalk.types import EntryKind


class WalkNode(Node):  # type: ignore
    """Node class representing one walk result in a rendered tree.

    Extends anytree.Node with the entry kind and, for directories that could not
    be listed, the failure description.

    Attributes:
        name (str): The base name of the node.
        parent (Optional[WalkNode]): The parent node in the tree.
        kind (EntryKind): The kind reported by the walk.
        error (Optional[str]): Failure description if listing this directory failed.

    Example:
        >>> root = WalkNode("data", kind=EntryKind.DIRECTORY)
        >>> child = WalkNode("a.txt", parent=root, kind=EntryKind.FILE)
        >>> child.label
        'a.txt'
        >>> root.label
        'data/'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["WalkNode"] = None,
        kind: EntryKind = EntryKind.FILE,
        error: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.error = error

    @property
    def label(self) -> str:
        """The node name decorated with its kind and any listing failure."""
        if self.kind is EntryKind.DIRECTORY:
            label = f"{self.name}/"
        elif self.kind is EntryKind.FILE:
            label = self.name
        else:
            label = f"{self.name} [{self.kind.value}]"
        if self.error is not None:
            label += f" [error: {self.error}]"
        return label
