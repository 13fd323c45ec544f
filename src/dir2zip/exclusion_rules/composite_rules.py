"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. The CLI uses
    this to union the base-name exclusion set with gitignore-style patterns.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dir2zip.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dir2zip.exclusion_rules.name_rules import NameExclusionRules
        >>> patterns = GitIgnoreExclusionRules()
        >>> patterns.add_rule("admin/src")
        >>> composite = CompositeExclusionRules([NameExclusionRules([".git"]), patterns])
        >>> composite.exclude("admin/src"), composite.exclude("lib/.git"), composite.exclude("lib/src")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine, evaluated in order.

        Raises:
            ValueError: If the rules sequence is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Stops at the first rule that excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Return True if ANY constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
