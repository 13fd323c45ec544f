"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dir2zip.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Base-name exclusion cannot express rules such as "leave out ``admin/src``
    but keep ``lib/src``". These rules fill that gap: patterns are matched with
    the pathspec library against the entry's path relative to the source root,
    exactly like Git matches paths against a .gitignore file.

    Supported syntax includes globs (``*.map``), directory patterns ending in
    ``/``, anchored paths (``admin/src``), negation (``!keep.map``), ``**`` and
    ``#`` comments. Later patterns override earlier ones.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("admin/src")
        >>> rules.add_rule("*.map")
        >>> rules.exclude("admin/src")
        True
        >>> rules.exclude("lib/src")
        False
        >>> rules.exclude("assets/app.js.map")
        True

    Note:
        Paths passed to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given files, if any.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        The path is matched exactly as provided, no normalization is performed.
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

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
                gitignore_content = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. ``"*.map"`` or ``"admin/src"``."""
        self._extend([GitWildMatchPattern(rule)])

    def has_rules(self) -> bool:
        # Comments and blank lines compile to patterns with include=None
        return any(pattern.include is not None for pattern in self._patterns)

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        self._patterns.extend(patterns)
        self.spec = PathSpec(self._patterns)
