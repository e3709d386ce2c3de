"""Depth-first traversal engine.

A walk over a tree is represented by a chain of DirectoryIterator objects, one per
directory on the current descent path. Each iterator caches the ordered, filtered
children of its own directory, remembers which of them it has already emitted, and
owns at most one child iterator for the subdirectory it is currently inside.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Set, Tuple

from diriter import path_utils
from diriter.permission_action import PermissionAction
from diriter.types import DirectorySignature, PathType

if TYPE_CHECKING:
    from diriter.dir_iterator import DirIterator

logger = logging.getLogger(__name__)


class DirectoryIterator:
    """Stateful, resumable depth-first iterator over the files below one directory.

    Only non-directory entries are emitted. Directories are entered in the position the
    filter chain gives them and their files are emitted before the next sibling.

    The children of a directory are listed lazily and cached together with the
    directory's signature (modification and metadata-change times). Whenever the
    signature changes, the children are listed and filtered again. Entries are
    remembered by name, not by position, so anything already emitted stays emitted
    even when a rescan reorders the directory.

    Every operation treats a directory that no longer exists as exhausted instead of
    raising.

    Attributes:
        path (Path): The directory this iterator walks. Never changes.
        parent (Optional[DirectoryIterator]): The iterator that descended into path,
            or None for the root of the walk.

    Example:
        >>> walk = DirIterator("src").iterator()  # doctest: +SKIP
        >>> walk.peek()  # doctest: +SKIP
        PosixPath('/work/src/app.py')
        >>> walk.next()  # doctest: +SKIP
        PosixPath('/work/src/app.py')
        >>> walk.prev()  # doctest: +SKIP
        PosixPath('/work/src/app.py')
    """

    def __init__(
        self, configuration: "DirIterator", path: PathType, parent: Optional["DirectoryIterator"] = None
    ) -> None:
        self._configuration = configuration
        self._path = path_utils.clean(path)
        self._parent = parent
        self._visited: List[str] = []
        self._visited_keys: Set[str] = set()
        self._active_child: Optional[DirectoryIterator] = None
        self._children: Optional[List[Path]] = None
        self._signature: Optional[DirectorySignature] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def parent(self) -> Optional["DirectoryIterator"]:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of directories between the root of the walk and this one."""
        return 0 if self._parent is None else self._parent.depth + 1

    @property
    def visited(self) -> Tuple[str, ...]:
        """Names emitted (files) or finished (directories) at this level, oldest first."""
        return tuple(self._visited)

    @property
    def active_child(self) -> Optional["DirectoryIterator"]:
        return self._active_child

    def peek(self) -> Optional[Path]:
        """Return the file the next call to next() would return, without consuming it.

        Nothing is marked as visited and no child iterator is kept, so any number of
        peek() calls leave the sequence produced by next() unchanged.
        """
        if not self._exists():
            return None

        skip: Optional[str] = None
        if self._active_child is not None:
            found = self._active_child.peek()
            if found is not None:
                return found
            # The exhausted child is retired by next(), which also marks it visited.
            skip = path_utils.identity(self._active_child.path)

        for candidate in self._unvisited_children():
            if path_utils.identity(candidate) == skip:
                continue
            if not candidate.is_dir():
                return candidate
            child = self._spawn(candidate)
            found = child.peek()
            if found is not None:
                return found
        return None

    def next(self) -> Optional[Path]:
        """Emit the next file of the walk and advance past it.

        Returns:
            The next file, or None when the walk is exhausted.

        Raises:
            InvalidFilterResultError: If a configured filter violates its contract.
            PermissionError: If a directory cannot be listed and the configuration's
                permission action is RAISE.
        """
        if not self._exists():
            return None

        if self._active_child is not None:
            found = self._active_child.next()
            if found is not None:
                return found
            self._mark_visited(self._active_child.path)
            self._active_child = None

        while True:
            candidate = self.next_unvisited_child()
            if candidate is None:
                return None
            if not candidate.is_dir():
                self._mark_visited(candidate)
                return candidate
            child = self._spawn(candidate)
            found = child.next()
            if found is not None:
                self._active_child = child
                return found
            self._mark_visited(candidate)

    def prev(self) -> Optional[Path]:
        """Undo the most recent step of the walk.

        The active child, if any, is asked to undo first. When it has nothing left to
        undo it is discarded and the most recently visited name at this level is
        forgotten. That entry is returned, so the following next() returns it again.
        If the entry is a directory, it is returned as is and the whole directory will
        be walked again from its start.

        Returns:
            The entry that was un-visited, or None when there is nothing to undo.
        """
        if not self._exists():
            return None

        if self._active_child is not None:
            undone = self._active_child.prev()
            if undone is not None:
                return undone
            self._active_child = None

        if not self._visited:
            return None
        key = self._visited.pop()
        self._visited_keys.discard(key)
        return self._path / key

    def each(self, consumer: Callable[[Path], object]) -> None:
        """Call consumer with every remaining file, in order."""
        while True:
            entry = self.next()
            if entry is None:
                return
            consumer(entry)

    def __iter__(self) -> "DirectoryIterator":
        return self

    def __next__(self) -> Path:
        entry = self.next()
        if entry is None:
            raise StopIteration
        return entry

    def next_unvisited_child(self) -> Optional[Path]:
        """Return the first child in the current ordering that has not been visited."""
        return next(self._unvisited_children(), None)

    def _unvisited_children(self) -> Iterator[Path]:
        return (child for child in self._current_children() if path_utils.identity(child) not in self._visited_keys)

    def _current_children(self) -> List[Path]:
        signature = self._current_signature()
        if signature is None:
            return []
        if self._children is None or signature != self._signature:
            logger.debug("Scanning %s", self._path)
            children = self._configuration.filter_paths(self._list_children())
            # Recorded together so a failed scan is retried on the next call.
            self._children, self._signature = children, signature
        return self._children

    def _list_children(self) -> List[Path]:
        try:
            return sorted(self._path.iterdir())
        except (FileNotFoundError, NotADirectoryError):
            return []
        except PermissionError:
            if self._configuration.permission_action == PermissionAction.RAISE:
                raise
            logger.warning("Permission denied listing %s; treating it as empty", self._path)
            return []

    def _current_signature(self) -> Optional[DirectorySignature]:
        try:
            return self._configuration.signature_of(self._path)
        except PermissionError:
            if self._configuration.permission_action == PermissionAction.RAISE:
                raise
            logger.warning("Permission denied reading %s; treating it as gone", self._path)
            return None

    def _exists(self) -> bool:
        return self._current_signature() is not None

    def _spawn(self, directory: Path) -> "DirectoryIterator":
        return DirectoryIterator(self._configuration, directory, self)

    def _mark_visited(self, path: Path) -> None:
        key = path_utils.identity(path)
        self._visited.append(key)
        self._visited_keys.add(key)
