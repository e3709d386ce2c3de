"""Configuration object for lazy directory iteration.

This module provides DirIterator, which records how a directory tree should be
walked (which entries are visible and in what order siblings are visited) and
hands out independent DirectoryIterator instances that perform the walk.
"""

from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from diriter import path_utils
from diriter.exclusion_rules.base_rules import BaseExclusionRules
from diriter.filters.filter_chain import FilterChain
from diriter.filters.providers import BaseFilterProvider
from diriter.iterator import DirectoryIterator
from diriter.permission_action import PermissionAction
from diriter.signature import stat_signature
from diriter.types import DirectorySignature, PathType, SignatureSource
from diriter.viability import ViabilityFilter


class DirIterator:
    """Configuration for walking a directory tree one file at a time.

    A DirIterator is cheap to create and holds no traversal state of its own. Each call
    to iterator() returns a fresh DirectoryIterator that shares this configuration by
    reference, so configuration changes made mid-walk are seen at the next rescan.

    Visibility:
        - Hidden entries (names starting with ``.``) are skipped unless include_hidden()
          is called.
        - File name patterns (fnmatch syntax) restrict which files are emitted. They are
          never applied to directories, which are always descended into.
        - Exclusion rules, when given, prune files and whole directories alike.

    Ordering:
        Siblings are listed by name and then passed through the filter chain. The filter
        added last is the primary sort key; earlier filters break its ties.

    Attributes:
        path (Path): The cleaned, absolute root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules pruning files and directories.
        permission_action (PermissionAction): How unreadable directories are handled.
        signature_source (SignatureSource): Reads the metadata that invalidates cached listings.

    Example:
        >>> walker = DirIterator("~/projects/app")  # doctest: +SKIP
        >>> walker.add_extensions(["py", "toml"])  # doctest: +SKIP
        >>> walker.add_filters(["order-by-name", "files-first"])  # doctest: +SKIP
        >>> for path in walker:  # doctest: +SKIP
        ...     print(path)
        /home/user/projects/app/pyproject.toml
        /home/user/projects/app/src/app/__init__.py
    """

    def __init__(
        self,
        path: PathType,
        filter_provider: Optional[BaseFilterProvider] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
        signature_source: Optional[SignatureSource] = None,
    ) -> None:
        """Initialize a DirIterator.

        Args:
            path: Root directory of the walk. Relative paths and ``~`` are expanded.
            filter_provider: Resolver for filter names. Defaults to the standard filters.
            exclusion_rules: Optional rules pruning files and directories.
            permission_action: How to handle directories that cannot be listed.
                Defaults to IGNORE.
            signature_source: Callable returning a directory's current signature, or None
                when it no longer exists. Defaults to reading mtime/ctime with os.stat.
        """
        self.path = path_utils.clean(path)
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self.signature_source: SignatureSource = signature_source or stat_signature
        self._patterns: List[str] = []
        self._ignore_case = False
        self._include_hidden = False
        self._filter_chain = FilterChain(filter_provider)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.path)!r})"

    # Patterns

    @property
    def patterns(self) -> Tuple[str, ...]:
        """The configured file name patterns, in the order they were added."""
        return tuple(self._patterns)

    def add_pattern(self, pattern: str) -> None:
        """Add an fnmatch pattern; files matching any pattern are emitted."""
        if not isinstance(pattern, str):
            raise TypeError(f"Patterns must be strings, got {type(pattern).__name__}")
        self._patterns.append(pattern)

    def add_patterns(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            self.add_pattern(pattern)

    def add_extension(self, extension: Optional[str]) -> None:
        """Add a pattern matching files with the given extension.

        The leading dot is optional: ``"py"`` and ``".py"`` both add ``*.py``. An empty
        extension adds ``*``, which matches every file.
        """
        self.add_pattern(f"*{normalize_extension(extension)}")

    def add_extensions(self, extensions: Iterable[Optional[str]]) -> None:
        for extension in extensions:
            self.add_extension(extension)

    # Case sensitivity

    def case_sensitive(self) -> None:
        """Match patterns case-sensitively (the default)."""
        self._ignore_case = False

    def case_insensitive(self) -> None:
        self._ignore_case = True

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    # Hidden entries

    def include_hidden(self) -> None:
        """Walk hidden files and directories too."""
        self._include_hidden = True

    def exclude_hidden(self) -> None:
        """Skip hidden files and directories (the default)."""
        self._include_hidden = False

    @property
    def includes_hidden(self) -> bool:
        return self._include_hidden

    # Filters

    @property
    def filters(self) -> Tuple[str, ...]:
        """The registered filter names, in the order they are applied."""
        return self._filter_chain.names

    def add_filter(self, name: str) -> None:
        """Append a filter to the chain.

        The filter added last is the primary sort criterion. Filter functions receive a
        list of sibling paths that share a parent, have not been emitted yet and satisfy
        the visibility settings; they return those paths reordered, possibly dropping some.

        Raises:
            InvalidFilterProviderError: If the installed provider does not implement name.
        """
        self._filter_chain.add(name)

    def add_filters(self, names: Iterable[str]) -> None:
        for name in names:
            self.add_filter(name)

    @property
    def filter_provider(self) -> BaseFilterProvider:
        return self._filter_chain.provider

    def set_filter_provider(self, provider: BaseFilterProvider) -> None:
        """Install a different filter-name resolver.

        Raises:
            TypeError: If provider is not a BaseFilterProvider.
            InvalidFilterProviderError: If provider does not implement every filter
                already registered. The previous provider stays installed.
        """
        self._filter_chain.provider = provider

    # Services used by DirectoryIterator

    def viability(self) -> ViabilityFilter:
        """Return a viability filter reflecting the current settings."""
        return ViabilityFilter(
            self.path,
            patterns=self.patterns,
            ignore_case=self._ignore_case,
            include_hidden=self._include_hidden,
            exclusion_rules=self.exclusion_rules,
        )

    def is_viable(self, path: Path) -> bool:
        """Return whether a single entry is eligible for iteration."""
        return self.viability().is_viable(path)

    def filter_paths(self, paths: Sequence[Path]) -> List[Path]:
        """Drop non-viable entries from one directory's children, then order them.

        Raises:
            InvalidFilterResultError: If a filter violates the filter contract.
        """
        return self._filter_chain.apply(self.viability().select(paths))

    def signature_of(self, path: Path) -> Optional[DirectorySignature]:
        return self.signature_source(path)

    # Iteration

    def iterator(self) -> DirectoryIterator:
        """Return a new iterator positioned before the first file of the tree."""
        return DirectoryIterator(self, self.path)

    def each(self, consumer: Callable[[Path], object]) -> None:
        """Call consumer with every file of the tree, in order."""
        self.iterator().each(consumer)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.iterator())


def normalize_extension(extension: Optional[str]) -> str:
    """Return extension with a single leading dot, or an empty string.

    Example:
        >>> normalize_extension("py"), normalize_extension(".py"), normalize_extension("")
        ('.py', '.py', '')
    """
    if not extension or extension.startswith("."):
        return extension or ""
    return f".{extension}"
