"""The standard library of sibling ordering filters."""

from pathlib import Path
from typing import Any, Callable, List, Sequence

from diriter.path_utils import identity


def preserve_sort_by(paths: Sequence[Path], key: Callable[[Path], Any]) -> List[Path]:
    """Sort paths by key, breaking ties by their position before the sort.

    Every standard ordering filter goes through this helper, which is what lets filters
    be chained: entries that compare equal under a later filter keep the order an
    earlier filter gave them.

    Args:
        paths: Entries in their current order.
        key: Function computing the comparison key of a single entry.

    Returns:
        A new list with the same entries, sorted by (key, original index).

    Example:
        >>> names = [Path("b"), Path("a2"), Path("a1")]
        >>> [p.name for p in preserve_sort_by(names, lambda p: p.name[0])]
        ['a2', 'a1', 'b']
    """
    indexed = list(enumerate(paths))
    indexed.sort(key=lambda item: (key(item[1]), item[0]))
    return [path for _, path in indexed]


def _mtime(path: Path) -> int:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        # Vanished since listing; sorts as oldest.
        return 0


class StandardFilters:
    """Namespace of the built-in filters.

    Each filter takes the children of one directory and returns them reordered. When
    several filters are configured, the one added last decides the primary order and
    the earlier ones only break its ties.

    Example:
        >>> from diriter.filters.providers import NamespaceFilterProvider
        >>> provider = NamespaceFilterProvider(StandardFilters)
        >>> provider.has_filter("files-first")
        True
    """

    @staticmethod
    def files_first(paths: Sequence[Path]) -> List[Path]:
        """Non-directories before directories."""
        return preserve_sort_by(paths, lambda path: 1 if path.is_dir() else 0)

    @staticmethod
    def directories_first(paths: Sequence[Path]) -> List[Path]:
        """Directories before non-directories."""
        return preserve_sort_by(paths, lambda path: 0 if path.is_dir() else 1)

    @staticmethod
    def order_by_mtime_asc(paths: Sequence[Path]) -> List[Path]:
        """Oldest entries first."""
        return preserve_sort_by(paths, _mtime)

    @staticmethod
    def order_by_mtime_desc(paths: Sequence[Path]) -> List[Path]:
        """Newest entries first."""
        return preserve_sort_by(paths, lambda path: -_mtime(path))

    @staticmethod
    def order_by_name(paths: Sequence[Path]) -> List[Path]:
        """Lexicographic order of the entry names."""
        return preserve_sort_by(paths, identity)

    @staticmethod
    def reverse(paths: Sequence[Path]) -> List[Path]:
        """Reverse the current order.

        This is a literal reversal, not a stable sort, so applying it twice restores
        the original order.
        """
        return list(reversed(paths))
