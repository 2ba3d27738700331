"""
Tests for stepspine.framework.library module.

Tests cover:
- Macro registration (single, multiple signatures, decorator)
- Duplicate detection by normalised signature
- Lookup by signature
- Finding compatible macros
"""

import re

import pytest

from stepspine.core.dictionary import Dictionary
from stepspine.core.errors import CircularDefinitionError, DuplicateMacroError, InvalidPatternError
from stepspine.framework.library import Library
from stepspine.framework.macro import Macro


def noop(ctx, *args):
    return None


class TestDefine:
    """Tests for Library.define."""

    def test_define_is_chainable(self):
        library = Library()
        assert library.define("I have cukes", noop) is library

    def test_define_expands_terms(self, cukes_library):
        macro = cukes_library.get_macro("I have $count cukes")
        assert macro.pattern.source == r"I have (\d+) cukes"

    def test_multiple_signatures(self):
        library = Library().define(["I have $count cukes", "I own $count cukes"], noop)
        assert len(library) == 2
        assert all(macro.handler is noop for macro in library.macros)

    def test_duplicate_signature_raises(self, cukes_library):
        with pytest.raises(DuplicateMacroError, match=r"Duplicate macro: \[I have \$count cukes\]"):
            cukes_library.define("I have $count cukes", noop)
        assert len(cukes_library) == 1

    @pytest.mark.parametrize(
        "first, second",
        [
            ("I have cukes", re.compile("I have cukes")),
            (re.compile("I have cukes"), "I have cukes"),
        ],
    )
    def test_equivalent_signatures_collide_in_either_order(self, first, second):
        library = Library().define(first, noop)
        with pytest.raises(DuplicateMacroError):
            library.define(second, noop)

    def test_duplicate_within_one_call(self):
        library = Library()
        with pytest.raises(DuplicateMacroError):
            library.define(["I have cukes", "I have cukes"], noop)

    def test_different_flags_do_not_collide(self):
        library = Library().define("I have cukes", noop)
        library.define(re.compile("I have cukes", re.IGNORECASE), noop)
        assert len(library) == 2

    def test_invalid_signature_raises(self):
        with pytest.raises(InvalidPatternError):
            Library().define("I have (", noop)

    def test_circular_term_raises_at_definition(self):
        library = Library()
        library.dictionary.define("a", "$b").define("b", "$a")
        with pytest.raises(CircularDefinitionError):
            library.define("I have $a", noop)
        assert len(library) == 0

    def test_uses_given_dictionary(self):
        dictionary = Dictionary().define("count", r"(\d+)")
        library = Library(dictionary)
        assert library.dictionary is dictionary
        library.define("I have $count cukes", noop)
        assert library.find_compatible_macros("I have 5 cukes")

    def test_context_is_bound_to_macro(self):
        seen = {}
        library = Library().define("whoami", lambda ctx: seen.update(ctx), context={"user": "alice"})
        library.get_macro("whoami").interpret("whoami")
        assert seen == {"user": "alice"}


class TestMacroDecorator:
    """Tests for the Library.macro decorator."""

    def test_registers_and_returns_function(self):
        library = Library()

        @library.macro("I have $count cukes", "I own $count cukes")
        def have_cukes(ctx, count):
            return int(count)

        assert have_cukes(None, "3") == 3
        assert library.get_macro("I own $count cukes").handler is have_cukes
        assert len(library) == 2

    def test_decorator_context(self):
        library = Library()

        @library.macro("whoami", context={"user": "alice"})
        def whoami(ctx):
            return ctx["user"]

        assert library.get_macro("whoami").interpret("whoami") == "alice"


class TestGetMacro:
    def test_round_trip(self):
        library = Library().define("I have $count cukes", noop)
        macro = library.get_macro("I have $count cukes")
        assert isinstance(macro, Macro)
        assert macro.is_identified_by("I have $count cukes")

    def test_missing_returns_none(self, cukes_library):
        assert cukes_library.get_macro("I eat $count cukes") is None


class TestFindCompatibleMacros:
    def test_filters_by_step(self, cukes_library):
        cukes_library.define("I eat $count cukes", noop)
        compatible = cukes_library.find_compatible_macros("I eat 2 cukes")
        assert [str(macro) for macro in compatible] == ["/I eat $count cukes/"]

    def test_registration_order(self):
        library = Library().define(["I have (.+)", "I (.+) cukes", "nothing"], noop)
        compatible = library.find_compatible_macros("I have 5 cukes")
        assert [str(macro) for macro in compatible] == ["/I have (.+)/", "/I (.+) cukes/"]

    def test_no_matches(self, cukes_library):
        assert cukes_library.find_compatible_macros("I have no cukes") == []

    def test_macros_property_is_a_copy(self, cukes_library):
        cukes_library.macros.clear()
        assert len(cukes_library) == 1
