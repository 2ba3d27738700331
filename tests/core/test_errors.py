"""Tests for stepspine.core.errors module."""

import pytest

from stepspine.core.errors import (
    AmbiguousStepError,
    CircularDefinitionError,
    DefinitionError,
    DuplicateMacroError,
    DuplicateTermError,
    ErrorCategory,
    ErrorContext,
    InvalidPatternError,
    ResolutionError,
    StepSpineError,
    UndefinedStepError,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_empty_context(self):
        ctx = ErrorContext()
        assert ctx.step is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_skips_none(self):
        ctx = ErrorContext(step="I have 5 cukes")
        ctx.metadata["scenario"] = "cukes"
        assert ctx.to_dict() == {"step": "I have 5 cukes", "scenario": "cukes"}


class TestStepSpineError:
    """Test the base error."""

    def test_defaults(self):
        error = StepSpineError("boom")
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.category == ErrorCategory.INTERNAL
        assert error.cause is None

    def test_cause_is_chained(self):
        cause = ValueError("inner")
        error = StepSpineError("outer", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "inner"

    def test_with_context_sets_fields_and_metadata(self):
        error = StepSpineError("boom").with_context(step="I eat cukes", scenario="lunch")
        assert error.context.step == "I eat cukes"
        assert error.context.metadata == {"scenario": "lunch"}

    def test_to_dict(self):
        error = UndefinedStepError("I have no cukes")
        assert error.to_dict() == {
            "error_type": "UndefinedStepError",
            "message": "Undefined step: [I have no cukes]",
            "category": "RESOLUTION",
            "context": {"step": "I have no cukes"},
        }

    def test_repr(self):
        assert repr(StepSpineError("boom")) == "StepSpineError('boom', category=INTERNAL)"


class TestDefinitionErrors:
    def test_duplicate_macro(self):
        error = DuplicateMacroError("I have $count cukes")
        assert str(error) == "Duplicate macro: [I have $count cukes]"
        assert isinstance(error, DefinitionError)
        assert error.category == ErrorCategory.DEFINITION
        assert error.context.signature == "I have $count cukes"

    def test_duplicate_term(self):
        error = DuplicateTermError("count")
        assert str(error) == "Duplicate definition: [count]"
        assert error.context.term == "count"

    def test_circular_definition_lists_chain(self):
        error = CircularDefinitionError(["a", "b", "a"])
        assert str(error) == "Circular definition: [a, b, a]"
        assert error.chain == ["a", "b", "a"]
        assert error.context.to_dict() == {"term": "a", "chain": ["a", "b", "a"]}


class TestOtherErrors:
    def test_invalid_pattern(self):
        error = InvalidPatternError("I have (", cause=ValueError("missing )"))
        assert str(error) == "Invalid pattern: [I have (] (missing ))"
        assert error.category == ErrorCategory.PATTERN
        assert not isinstance(error, DefinitionError)

    def test_ambiguous_step_lists_candidates(self):
        error = AmbiguousStepError("I have 5 cukes", ["/a/", "/b/"])
        assert str(error) == "Ambiguous step: [I have 5 cukes]"
        assert isinstance(error, ResolutionError)
        assert error.to_dict()["context"] == {"step": "I have 5 cukes", "candidates": ["/a/", "/b/"]}

    @pytest.mark.parametrize(
        "error",
        [
            UndefinedStepError("x"),
            AmbiguousStepError("x"),
            DuplicateTermError("x"),
            InvalidPatternError("x"),
        ],
    )
    def test_all_errors_are_stepspine_errors(self, error):
        assert isinstance(error, StepSpineError)
