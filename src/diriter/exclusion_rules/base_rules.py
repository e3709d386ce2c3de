from abc import ABC, abstractmethod
from typing import Sequence, Union

from diriter.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that prune entries from an iteration.

    Unlike file-name patterns, which only decide which files are emitted, exclusion
    rules apply to directories too: an excluded directory is never descended into.

    The iterator calls exclude() with the entry's path relative to the iteration root,
    using forward slashes, with a trailing slash appended for directories (for example
    ``"build/"`` or ``"src/main.py"``).

    Example:
        >>> from diriter.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine whether a root-relative path should be left out of the iteration.

        Args:
            path (str): The path to check, relative to the iteration root, with forward
                slashes and a trailing slash for directories.

        Returns:
            bool: True if the path should be excluded, False if it should be kept.
        """
        pass

    def has_rules(self) -> bool:
        """Report whether any rule is configured. Rules that cannot tell assume they have some."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Only rule types backed by rule files override this.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
