"""Tests for stepspine.core.utils."""

import re

from stepspine.core.utils import ensure_list


class TestEnsureList:
    def test_none(self):
        assert ensure_list(None) == []

    def test_string_is_single_item(self):
        assert ensure_list("I have 5 cukes") == ["I have 5 cukes"]

    def test_compiled_pattern_is_single_item(self):
        pattern = re.compile("cukes")
        assert ensure_list(pattern) == [pattern]

    def test_iterables_are_copied(self):
        steps = ["a", "b"]
        result = ensure_list(steps)
        assert result == steps
        assert result is not steps
        assert ensure_list(step for step in ("a", "b")) == ["a", "b"]

    def test_non_iterable_is_single_item(self):
        marker = object()
        assert ensure_list(marker) == [marker]
