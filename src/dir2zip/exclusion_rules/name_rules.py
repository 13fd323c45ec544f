"""Exclusion rules matching exact base names at any depth."""

import posixpath
from os import PathLike
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Sequence, Set, Union

from dir2zip.types import PathType

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules based on exact base-name membership.

    An entry is excluded iff its base name is one of the configured names. The
    match ignores where the entry sits in the tree: ``node_modules`` excludes
    ``node_modules`` at the root as well as ``vendor/lib/node_modules``. There
    is no globbing and no case folding.

    Names can be supplied at construction, added one at a time with
    ``add_rule()``, or read from files with ``load_rules()``. Name files hold
    one name per line; blank lines and lines starting with ``#`` are ignored.

    Attributes:
        names (FrozenSet[str]): Snapshot of the configured names.

    Example:
        >>> rules = NameExclusionRules([".git"])
        >>> rules.add_rule("package.json")
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("admin/package.json")
        True
        >>> rules.exclude("admin/package.json.bak")
        False
    """

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize the rules with optional names and name files.

        Args:
            names: Base names to exclude.
            rules_files: Path(s) to file(s) listing additional names.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._names: Set[str] = set()
        for name in names or ():
            self.add_rule(name)
        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(self._names)

    def exclude(self, path: str) -> bool:
        """Check whether the base name of *path* is an excluded name.

        Trailing slashes (used to mark directories) are ignored.
        """
        name = posixpath.basename(path.replace("\\", "/").rstrip("/"))
        return name in self._names

    def add_rule(self, rule: str) -> None:
        """Add a single base name.

        Raises:
            ValueError: If the name is empty or contains a path separator.
        """
        name = rule.strip()
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"Exclusion name must be a single path component: {rule!r}")
        self._names.add(name)

    def update(self, names: Iterable[str]) -> None:
        """Add several base names at once."""
        for name in names:
            self.add_rule(name)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Read base names from one or more files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                for line in f.read().splitlines():
                    line = line.strip()
                    if line and not line.startswith("#"):
                        self.add_rule(line)

    def has_rules(self) -> bool:
        return bool(self._names)

    def __repr__(self) -> str:
        return f"NameExclusionRules({sorted(self._names)!r})"
