"""
Structured error types for stepspine.

Every failure the step pipeline can raise is a subclass of StepSpineError.
Errors carry a category, a structured ErrorContext (the step, signature or
term involved) and an optional chained cause, so callers can log them with
``to_dict()`` instead of parsing messages.

Manifesto:
    - **Fail fast:** Definition and resolution errors abort immediately
    - **Typed hierarchy:** Catch DefinitionError or ResolutionError as a group
    - **Rich context:** Errors name the offending step or signature
    - **Handler errors stay untouched:** Only the pipeline's own failures
      are wrapped in these types

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                     StepSpineError                        │
        │              (category, context, cause)                   │
        ├──────────────────────────────────────────────────────────┤
        │  DefinitionError        InvalidPatternError               │
        │  (DEFINITION)           (PATTERN)                         │
        │       │                                                   │
        │  DuplicateMacroError    ResolutionError                   │
        │  DuplicateTermError     (RESOLUTION)                      │
        │  CircularDefinition          │                            │
        │                         UndefinedStepError                │
        │                         AmbiguousStepError                │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = UndefinedStepError("I have no cukes")
    >>> str(error)
    'Undefined step: [I have no cukes]'
    >>> error.context.step
    'I have no cukes'

Tags:
    error-handling, exception-hierarchy, error-context, stepspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    DEFINITION = "DEFINITION"    # Registering macros or terms
    PATTERN = "PATTERN"          # Malformed regular expressions
    RESOLUTION = "RESOLUTION"    # Choosing a macro for a step
    INTERNAL = "INTERNAL"        # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        step: Step text being resolved
        signature: Macro signature being registered or looked up
        term: Dictionary term being defined
        chain: Term expansion chain (circular definitions)
        metadata: Additional key-value pairs
    """

    step: str | None = None
    signature: str | None = None
    term: str | None = None
    chain: list[str] | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["step", "signature", "term", "chain"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class StepSpineError(Exception):
    """
    Base exception for all stepspine errors.

    Subclasses set ``default_category``. The message is stored verbatim and
    is what ``str(error)`` returns.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> StepSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise UndefinedStepError(step).with_context(scenario="cukes")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# DEFINITION ERRORS
# =============================================================================


class DefinitionError(StepSpineError):
    """A macro or term could not be registered."""

    default_category = ErrorCategory.DEFINITION


class DuplicateMacroError(DefinitionError):
    """A macro with an equivalent signature already exists in the library."""

    def __init__(self, signature: str, **kwargs: Any):
        super().__init__(
            f"Duplicate macro: [{signature}]",
            context=ErrorContext(signature=signature),
            **kwargs,
        )
        self.signature = signature


class DuplicateTermError(DefinitionError):
    """A term with the same name is already defined in the dictionary."""

    def __init__(self, term: str, **kwargs: Any):
        super().__init__(
            f"Duplicate definition: [{term}]",
            context=ErrorContext(term=term),
            **kwargs,
        )
        self.term = term


class CircularDefinitionError(DefinitionError):
    """Term expansion revisited a term that is still being expanded."""

    def __init__(self, chain: Sequence[str], **kwargs: Any):
        chain = list(chain)
        super().__init__(
            f"Circular definition: [{', '.join(chain)}]",
            context=ErrorContext(term=chain[-1] if chain else None, chain=chain),
            **kwargs,
        )
        self.chain = chain


# =============================================================================
# PATTERN ERRORS
# =============================================================================


class InvalidPatternError(StepSpineError):
    """A signature or term definition is not a valid regular expression."""

    default_category = ErrorCategory.PATTERN

    def __init__(self, pattern: str, *, cause: Exception | None = None, **kwargs: Any):
        detail = f" ({cause})" if cause is not None else ""
        super().__init__(
            f"Invalid pattern: [{pattern}]{detail}",
            context=ErrorContext(signature=pattern),
            cause=cause,
            **kwargs,
        )
        self.pattern = pattern


# =============================================================================
# RESOLUTION ERRORS
# =============================================================================


class ResolutionError(StepSpineError):
    """A step could not be resolved to exactly one macro."""

    default_category = ErrorCategory.RESOLUTION


class UndefinedStepError(ResolutionError):
    """No registered macro matches the step."""

    def __init__(self, step: str, **kwargs: Any):
        super().__init__(
            f"Undefined step: [{step}]",
            context=ErrorContext(step=step),
            **kwargs,
        )
        self.step = step


class AmbiguousStepError(ResolutionError):
    """Two or more macros tie for the best similarity score."""

    def __init__(self, step: str, candidates: Sequence[str] = (), **kwargs: Any):
        context = ErrorContext(step=step)
        if candidates:
            context.metadata["candidates"] = list(candidates)
        super().__init__(f"Ambiguous step: [{step}]", context=context, **kwargs)
        self.step = step
        self.candidates = list(candidates)
