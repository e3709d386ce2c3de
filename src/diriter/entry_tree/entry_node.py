"""Node representation for entries emitted by an iteration."""

from typing import Any, Optional

from anytree import Node


class EntryNode(Node):  # type: ignore
    """Node class representing an emitted file or one of its ancestor directories.

    Extends anytree.Node with a flag telling directories from files. Children keep the
    order in which they were attached, which is the order the iteration produced them.

    Attributes:
        name (str): The basename of the entry.
        parent (Optional[EntryNode]): The containing directory's node.
        is_dir (bool): True for directory nodes.

    Example:
        >>> root = EntryNode("project", is_dir=True)
        >>> child = EntryNode("setup.py", parent=root)
        >>> child.is_dir, root.children[0].name
        (False, 'setup.py')
    """

    def __init__(self, name: str, parent: Optional["EntryNode"] = None, is_dir: bool = False, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    def child_named(self, name: str) -> Optional["EntryNode"]:
        """Return the direct child called name, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    @property
    def label(self) -> str:
        """Display name, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_dir else self.name
