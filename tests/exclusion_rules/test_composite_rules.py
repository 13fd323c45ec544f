"""Unit tests for composite exclusion rules."""

from unittest.mock import Mock

import pytest

from dir2zip.exclusion_rules.base_rules import BaseExclusionRules
from dir2zip.exclusion_rules.composite_rules import CompositeExclusionRules
from dir2zip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2zip.exclusion_rules.name_rules import NameExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_patterns=None, has_rules_result=True):
        self.exclude_patterns = exclude_patterns or []
        self.has_rules_result = has_rules_result

    def exclude(self, path: str) -> bool:
        return path in self.exclude_patterns

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_with_empty_rules(self):
        with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
            CompositeExclusionRules([])

    def test_init_with_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
            CompositeExclusionRules([MockExclusionRules(), "invalid"])

    def test_exclude_none_match(self):
        composite = CompositeExclusionRules(
            [MockExclusionRules(exclude_patterns=["file1.txt"]), MockExclusionRules(exclude_patterns=["file2.txt"])]
        )

        assert not composite.exclude("file3.txt")

    def test_exclude_any_match(self):
        composite = CompositeExclusionRules(
            [MockExclusionRules(exclude_patterns=["file1.txt"]), MockExclusionRules(exclude_patterns=["file2.txt"])]
        )

        assert composite.exclude("file1.txt")
        assert composite.exclude("file2.txt")

    def test_exclude_short_circuit(self):
        rule2 = Mock(spec=BaseExclusionRules)
        rule2.exclude = Mock(return_value=False)
        composite = CompositeExclusionRules([MockExclusionRules(exclude_patterns=["file.txt"]), rule2])

        assert composite.exclude("file.txt")
        rule2.exclude.assert_not_called()

    def test_has_rules(self):
        assert CompositeExclusionRules([MockExclusionRules(has_rules_result=False), MockExclusionRules()]).has_rules()
        assert not CompositeExclusionRules(
            [MockExclusionRules(has_rules_result=False), MockExclusionRules(has_rules_result=False)]
        ).has_rules()

    def test_add_rule_not_supported(self):
        composite = CompositeExclusionRules([MockExclusionRules()])

        with pytest.raises(NotImplementedError, match="CompositeExclusionRules doesn't support adding"):
            composite.add_rule("*.txt")

    def test_get_rules_returns_copy(self):
        rule = MockExclusionRules()
        composite = CompositeExclusionRules([rule])
        rules = composite.get_rules()
        rules.clear()

        assert composite.get_rules() == [rule]

    def test_names_and_patterns_together(self):
        patterns = GitIgnoreExclusionRules()
        patterns.add_rule("admin/src")
        composite = CompositeExclusionRules([NameExclusionRules([".git", "node_modules"]), patterns])

        assert composite.exclude("admin/src")
        assert composite.exclude("lib/node_modules")
        assert not composite.exclude("lib/src")
        assert not composite.exclude("admin/main.js")
