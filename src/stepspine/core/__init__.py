"""stepspine core -- pattern primitives for step interpretation.

Manifesto:
    ``stepspine.core`` holds everything that knows nothing about macros:
    compiling and stripping patterns, expanding dictionary terms, scoring
    similarity and merging execution contexts. The framework layer composes
    these into libraries, competitions and interpreters.

Architecture::

    Layer 1 -- Errors & Settings
        errors.py          Structured error hierarchy (StepSpineError)
        settings.py        pydantic-settings (term prefix, logging)
        logging/           structlog configuration, context, timing

    Layer 2 -- Primitives
        patterns.py        CompiledPattern, compile_pattern, strip_source
        dictionary.py      Term definitions and placeholder expansion
        scoring.py         Levenshtein distance + SimilarityScore
        environment.py     Shallow-merging execution context
        utils.py           ensure_list
"""

from stepspine.core.dictionary import UNDEFINED_TERM_PATTERN, Dictionary
from stepspine.core.environment import Environment
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
from stepspine.core.patterns import CompiledPattern, compile_pattern, strip_source
from stepspine.core.scoring import SimilarityScore, levenshtein_distance
from stepspine.core.settings import StepSpineSettings, get_settings

__all__ = [
    # errors
    "StepSpineError",
    "ErrorCategory",
    "ErrorContext",
    "DefinitionError",
    "DuplicateMacroError",
    "DuplicateTermError",
    "CircularDefinitionError",
    "InvalidPatternError",
    "ResolutionError",
    "UndefinedStepError",
    "AmbiguousStepError",
    # settings
    "StepSpineSettings",
    "get_settings",
    # patterns
    "CompiledPattern",
    "compile_pattern",
    "strip_source",
    # dictionary
    "Dictionary",
    "UNDEFINED_TERM_PATTERN",
    # scoring
    "SimilarityScore",
    "levenshtein_distance",
    # environment
    "Environment",
]
