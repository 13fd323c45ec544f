from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2zip.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Exclusion rules decide which entries of a source tree are left out of the
    archive. Rules are consulted with a path relative to the source root, using
    forward slashes; directories may additionally be checked with a trailing
    slash. When a directory is excluded its whole subtree is skipped, so rules
    never see paths below an excluded directory.

    Loading rules from files and adding individual rules are optional
    capabilities that depend on the rule type.

    Example:
        >>> from dir2zip.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules([".git", "node_modules"])
        >>> rules.exclude("vendor/node_modules")
        True
        >>> rules.exclude("node_modules_backup")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The file or directory path to check, relative to the
                root of the directory being archived.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the
                implementation (a base name, a gitignore pattern, ...).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True
