"""Tree rendering of the files produced by an iteration."""

from .entry_node import EntryNode
from .entry_tree import build_entry_tree, stream_entry_tree

__all__ = ["EntryNode", "build_entry_tree", "stream_entry_tree"]
