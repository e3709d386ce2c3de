"""Build and render a tree from the ordered files of an iteration.

Unlike a directory listing, the tree only contains directories that hold at least
one emitted file, and siblings appear in the order the iteration produced them
rather than being re-sorted.
"""

from pathlib import Path
from typing import Iterable, Iterator

from anytree import ContStyle, RenderTree

from diriter.entry_tree.entry_node import EntryNode


def build_entry_tree(root: Path, entries: Iterable[Path]) -> EntryNode:
    """Attach every entry under a node for root, creating directory nodes on demand.

    Args:
        root: The root directory of the iteration.
        entries: Emitted files, each located below root.

    Returns:
        The root node.

    Raises:
        ValueError: If an entry is not located below root.

    Example:
        >>> tree = build_entry_tree(Path("/repo"), [Path("/repo/src/a.py"), Path("/repo/README")])
        >>> [node.label for node in tree.descendants]
        ['src/', 'a.py', 'README']
    """
    root_node = EntryNode(root.name or str(root), is_dir=True)
    for entry in entries:
        parts = entry.relative_to(root).parts
        node = root_node
        for directory in parts[:-1]:
            existing = node.child_named(directory)
            node = existing if existing is not None else EntryNode(directory, parent=node, is_dir=True)
        EntryNode(parts[-1], parent=node)
    return root_node


def stream_entry_tree(root: EntryNode) -> Iterator[str]:
    """Yield the lines of a tree drawing of root, in the style of the Unix tree command.

    Example:
        >>> tree = build_entry_tree(Path("/repo"), [Path("/repo/src/a.py"), Path("/repo/README")])
        >>> print("\\n".join(stream_entry_tree(tree)))
        repo/
        ├── src/
        │   └── a.py
        └── README
    """
    for prefix, _, node in RenderTree(root, style=ContStyle()):
        yield f"{prefix}{node.label}"
