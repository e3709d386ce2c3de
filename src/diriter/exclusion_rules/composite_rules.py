"""Combine several exclusion rule objects into one."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclude a path if ANY constituent rule excludes it.

    Attributes:
        rules (List[BaseExclusionRules]): The constituent rules, evaluated in order.

    Example:
        >>> from diriter.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> vcs = GitIgnoreExclusionRules()
        >>> vcs.add_rule(".git/")
        >>> builds = GitIgnoreExclusionRules()
        >>> builds.add_rule("dist/")
        >>> composite = CompositeExclusionRules([vcs, builds])
        >>> composite.exclude("dist/"), composite.exclude("src/")
        (True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize the composite.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")
        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Append another rule object.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
