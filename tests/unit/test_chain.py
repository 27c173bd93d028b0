"""
Unit Tests - Text chains and formatter guards
"""
import re

import pytest

from convenia_util.chain import chain, replace
from convenia_util.guards import format_for, format_for_type, guard_by, guard_by_type
from convenia_util.types import TypeTag


class TestChain:
    """Tests for the generic left fold"""

    @pytest.mark.unit
    def test_steps_run_in_order(self):
        calls = []

        def selector(value):
            def step(suffix):
                calls.append(suffix)
                return value + suffix
            return step

        assert chain("a", selector, [("b",), ("c",), ("d",)]) == "abcd"
        assert calls == ["b", "c", "d"]

    @pytest.mark.unit
    def test_no_steps_returns_initial(self):
        assert chain(42, lambda value: None, []) == 42


class TestReplace:
    """Tests for chained replace steps"""

    @pytest.mark.unit
    def test_literal_and_pattern_steps(self):
        result = replace("1200.00", [
            (".", ",", 1),
            (re.compile(r"(\d)(?=(\d{3})+(?!\d))"), r"\1."),
        ])
        assert result == "1.200,00"

    @pytest.mark.unit
    def test_count_limits_replacements(self):
        assert replace("a-a-a", [("a", "b", 1)]) == "b-a-a"
        assert replace("a-a-a", [("a", "b")]) == "b-b-b"
        assert replace("111", [(re.compile("1"), "2", 2)]) == "221"

    @pytest.mark.unit
    def test_each_step_sees_previous_output(self):
        # The second step only matches because of the first
        assert replace("ab", [("a", "x"), ("xb", "ok")]) == "ok"


class TestGuards:
    """Tests for guarded formatters"""

    @pytest.mark.unit
    def test_guard_by_passes_all_arguments(self):
        seen = []

        def predicate(value, limit=0):
            seen.append((value, limit))
            return value > limit

        double = guard_by(predicate, lambda value, limit=0: value * 2)

        assert double(3, limit=1) == 6
        assert double(1, limit=1) is None
        assert seen == [(3, 1), (1, 1)]

    @pytest.mark.unit
    def test_guard_by_type(self):
        upper = guard_by_type(TypeTag.STRING, str.upper)

        assert upper("abc") == "ABC"
        assert upper(42) is None
        assert upper(None) is None

    @pytest.mark.unit
    def test_decorator_forms_keep_metadata(self):
        @format_for_type("String")
        def shout(value):
            """Uppercase text."""
            return value.upper() + "!"

        @format_for(lambda value: value is not None)
        def wrap(value):
            return f"[{value}]"

        assert shout("oi") == "OI!"
        assert shout(1) is None
        assert shout.__name__ == "shout"
        assert shout.__doc__ == "Uppercase text."
        assert wrap(0) == "[0]"
        assert wrap(None) is None
