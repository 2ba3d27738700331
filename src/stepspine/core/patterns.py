"""
Pattern engine - compiled regular expressions for step signatures.

Wraps :mod:`re` with the few operations the step pipeline needs: compile with
typed errors, test a step, pull captured groups out of a step, and "strip" a
pattern down to its literal words for similarity scoring.

Manifesto:
    Matching uses real regular expressions. Scoring never does: it compares
    a step with the stripped pattern source, which is plain text.

Architecture:
    ::

        signature ──compile_pattern()──▶ CompiledPattern
                                           │
                    ┌──────────────────────┼─────────────────────┐
                    ▼                      ▼                     ▼
               test(step)            groups(step)            strip()
               bool                  [[arg, ...], ...]       "I have cukes"

Examples:
    >>> pattern = compile_pattern(r"I have (\\d+) cukes")
    >>> pattern.test("I have 5 cukes")
    True
    >>> pattern.groups("I have 5 cukes")
    [['5']]
    >>> pattern.strip()
    'I have  cukes'

Tags:
    regex, pattern-matching, stepspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from stepspine.core.errors import InvalidPatternError

# Each strip pass keeps the single non-backslash character in front of the
# construct it removes, so escaped constructs survive until the alias pass.
_GROUPS_PATTERN = re.compile(r"(^|[^\\])\(.*?\)")
_SETS_PATTERN = re.compile(r"(^|[^\\])\[.*?\]")
_REPETITIONS_PATTERN = re.compile(r"(^|[^\\])\{.*?\}")
_REGEX_ALIASES_PATTERN = re.compile(r"(^|[^\\])\\.")
_NON_WORD_TOKENS_PATTERN = re.compile(r"[^\w\s]")

_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
    (re.ASCII, "a"),
)


def strip_source(source: str) -> str:
    """
    Remove regular expression syntax from ``source``.

    Groups, character sets, brace repetitions and escape sequences are
    dropped (in that order), then any remaining punctuation.
    """
    stripped = _GROUPS_PATTERN.sub(r"\1", source)
    stripped = _SETS_PATTERN.sub(r"\1", stripped)
    stripped = _REPETITIONS_PATTERN.sub(r"\1", stripped)
    stripped = _REGEX_ALIASES_PATTERN.sub(r"\1", stripped)
    return _NON_WORD_TOKENS_PATTERN.sub("", stripped)


@dataclass(frozen=True)
class CompiledPattern:
    """
    A compiled regular expression.

    Attributes:
        regex: The compiled :class:`re.Pattern`
        repeat: When True, :meth:`groups` collects every match instead of
            only the first one
    """

    regex: re.Pattern[str]
    repeat: bool = False

    @property
    def source(self) -> str:
        return self.regex.pattern

    @property
    def flags(self) -> int:
        return self.regex.flags

    def test(self, text: str) -> bool:
        """Whether the pattern matches anywhere in ``text``."""
        return self.regex.search(text) is not None

    def groups(self, text: str) -> list[list[str | None]]:
        """Captured groups of each match, one list per match."""
        if self.repeat:
            matches = list(self.regex.finditer(text))
        else:
            match = self.regex.search(text)
            matches = [match] if match else []
        return [list(match.groups()) for match in matches]

    def strip(self) -> str:
        """The pattern source with all regex syntax removed."""
        return strip_source(self.source)

    def equals(self, other: CompiledPattern) -> bool:
        return str(self) == str(other)

    def __str__(self) -> str:
        letters = "".join(letter for flag, letter in _FLAG_LETTERS if self.flags & flag)
        return f"/{self.source}/{letters}"


PatternLike = Union[str, re.Pattern, CompiledPattern]


def compile_pattern(pattern: PatternLike, *, flags: int = 0, repeat: bool = False) -> CompiledPattern:
    """
    Compile ``pattern`` into a :class:`CompiledPattern`.

    Args:
        pattern: Pattern text, a compiled ``re.Pattern`` or a CompiledPattern
        flags: ``re`` flags applied when compiling pattern text
        repeat: Collect every match in :meth:`CompiledPattern.groups`

    Raises:
        InvalidPatternError: If the pattern text is not a valid regular expression
    """
    if isinstance(pattern, CompiledPattern):
        if pattern.repeat == repeat:
            return pattern
        return CompiledPattern(pattern.regex, repeat)
    if isinstance(pattern, re.Pattern):
        return CompiledPattern(pattern, repeat)
    try:
        regex = re.compile(pattern, flags)
    except (re.error, TypeError) as e:
        raise InvalidPatternError(str(pattern), cause=e) from e
    return CompiledPattern(regex, repeat)
