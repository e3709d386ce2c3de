"""Per-entry visibility checks applied before any ordering filter runs."""

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from diriter.exclusion_rules.base_rules import BaseExclusionRules
from diriter.path_utils import is_hidden


class ViabilityFilter:
    """Decide whether a listed entry may take part in the iteration at all.

    An entry is viable when all of the following hold:

    - it still exists (it may have vanished since its directory was listed);
    - it is not hidden, or hidden entries are included;
    - it is a directory, or no patterns are configured, or it matches one of them;
    - the exclusion rules, if any, do not exclude it.

    Patterns constrain which files are emitted, never which directories are entered.
    They are fnmatch patterns matched against the entry's full path, so ``*`` also
    matches path separators and ``*.txt`` selects files by extension anywhere.

    Attributes:
        root (Path): Root of the iteration; exclusion rules see paths relative to it.
        patterns (Sequence[str]): File name patterns.
        ignore_case (bool): Whether patterns are matched case-insensitively.
        include_hidden (bool): Whether hidden entries are viable.
        exclusion_rules (Optional[BaseExclusionRules]): Additional pruning rules.

    Example:
        >>> viability = ViabilityFilter(Path("/repo"), patterns=["*.txt"])
        >>> viability.matches_patterns(Path("/repo/notes.TXT"))
        False
        >>> ViabilityFilter(Path("/repo"), ["*.txt"], ignore_case=True).matches_patterns(Path("/repo/notes.TXT"))
        True
    """

    def __init__(
        self,
        root: Path,
        patterns: Sequence[str] = (),
        ignore_case: bool = False,
        include_hidden: bool = False,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.root = root
        self.patterns = patterns
        self.ignore_case = ignore_case
        self.include_hidden = include_hidden
        self.exclusion_rules = exclusion_rules

    def is_viable(self, path: Path) -> bool:
        try:
            if not path.exists():
                return False
            is_dir = path.is_dir()
        except PermissionError:
            # The entry is listed but cannot be inspected.
            return False
        if not self.include_hidden and is_hidden(path):
            return False
        if not is_dir and not self.matches_patterns(path):
            return False
        return not self.is_excluded(path, is_dir)

    def matches_patterns(self, path: Path) -> bool:
        """Return True when no patterns are configured or any pattern matches path."""
        if not self.patterns:
            return True
        name = str(path)
        if self.ignore_case:
            name = name.lower()
            return any(fnmatchcase(name, pattern.lower()) for pattern in self.patterns)
        return any(fnmatchcase(name, pattern) for pattern in self.patterns)

    def is_excluded(self, path: Path, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        try:
            relative = path.relative_to(self.root).as_posix()
        except ValueError:
            relative = path.as_posix()
        if is_dir:
            relative += "/"
        return self.exclusion_rules.exclude(relative)

    def select(self, paths: Iterable[Path]) -> List[Path]:
        """Return the viable entries of paths, preserving order."""
        return [path for path in paths if self.is_viable(path)]
