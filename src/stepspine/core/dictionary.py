"""
Dictionary of terms for step signatures.

A term is a named, reusable sub-pattern. Signatures refer to terms with a
placeholder (``$count`` with the default prefix) and the dictionary expands
those placeholders into plain regular expression text before a macro is
compiled::

    dictionary = Dictionary().define("count", r"(\\d+)")
    dictionary.expand("I have $count cukes")   # 'I have (\\d+) cukes'

A backslash in front of the prefix (``\\$count``) escapes the placeholder.
Placeholders naming undefined terms expand to a catch-all ``(.+)`` group.

Term definitions are not validated when they are defined; circular
references are detected when a signature using them is expanded.

Thread-safety: a Dictionary is plain mutable state with no locking. Define
all terms before interpreting scenarios, from one thread.

Tags:
    dictionary, terms, pattern-expansion, stepspine

Doc-Types:
    api-reference
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from stepspine.core.errors import CircularDefinitionError, DuplicateTermError
from stepspine.core.logging import get_logger
from stepspine.core.patterns import CompiledPattern, compile_pattern
from stepspine.core.settings import get_settings

logger = get_logger(__name__)

UNDEFINED_TERM_PATTERN = "(.+)"

# A single leading or trailing "/" as in a /regex/ literal
_ENCLOSING_SLASHES = re.compile(r"^/|/$")


class Dictionary:
    """Owns a set of terms and expands them inside signatures."""

    def __init__(self, prefix: str | None = None):
        self.prefix = prefix or get_settings().term_prefix
        self._terms: dict[str, str] = {}
        self._term_pattern = compile_pattern(
            rf"(?<!\\){re.escape(self.prefix)}(\w+)",
            repeat=True,
        )

    @property
    def terms(self) -> Mapping[str, str]:
        """Read-only view of the defined terms."""
        return MappingProxyType(self._terms)

    def define(self, term: str, definition: str | re.Pattern) -> Dictionary:
        """
        Define a term.

        Args:
            term: Term name, referenced as ``<prefix><term>`` in signatures
            definition: Pattern text or compiled pattern, which may itself
                refer to other terms

        Raises:
            DuplicateTermError: If the term is already defined
        """
        if self.is_defined(term):
            raise DuplicateTermError(term)
        self._terms[term] = _normalise(definition)
        logger.debug("term_defined", term=term, definition=self._terms[term])
        return self

    def is_defined(self, term: str) -> bool:
        return term in self._terms

    def expand(self, pattern: str, already_expanding: Sequence[str] | None = None) -> str:
        """
        Replace every term placeholder in ``pattern`` with its definition.

        Args:
            pattern: Pattern text containing placeholders
            already_expanding: Terms whose expansion led here (used to detect
                circular definitions)

        Returns:
            Pattern text without placeholders

        Raises:
            CircularDefinitionError: If a term refers back to itself,
                directly or through other terms
        """
        already_expanding = list(already_expanding or [])
        if not self._is_expandable(pattern):
            return pattern
        return self._expand_sub_terms(pattern, already_expanding)

    def _expand_sub_terms(self, pattern: str, already_expanding: list[str]) -> str:
        for (sub_term,) in self._sub_terms(pattern):
            if sub_term in already_expanding:
                raise CircularDefinitionError([*already_expanding, sub_term])
            definition = self._expand_sub_term(sub_term, already_expanding)
            pattern = self._placeholder(sub_term).sub(lambda _match: definition, pattern, count=1)
        return pattern

    def _expand_sub_term(self, sub_term: str, already_expanding: list[str]) -> str:
        definition = self._terms.get(sub_term, UNDEFINED_TERM_PATTERN)
        if self._is_expandable(definition):
            return self.expand(definition, [*already_expanding, sub_term])
        return definition

    def _sub_terms(self, pattern: str) -> list[list[str | None]]:
        return self._term_pattern.groups(pattern)

    def _placeholder(self, sub_term: str) -> re.Pattern:
        return re.compile(rf"(?<!\\){re.escape(self.prefix)}{re.escape(sub_term)}(?!\w)")

    def _is_expandable(self, pattern: str) -> bool:
        return self._term_pattern.test(pattern)

    def __repr__(self) -> str:
        return f"Dictionary(prefix={self.prefix!r}, terms={sorted(self._terms)})"


def _normalise(definition: str | re.Pattern | CompiledPattern) -> str:
    if isinstance(definition, CompiledPattern):
        definition = definition.source
    elif isinstance(definition, re.Pattern):
        definition = definition.pattern
    return _ENCLOSING_SLASHES.sub("", str(definition))
