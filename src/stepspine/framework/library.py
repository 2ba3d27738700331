"""Macro library for registering and finding step definitions.

Manifesto:
    A library is an explicit, owned registry: the macros and dictionary
    terms it holds are visible at the call site that builds it, and tests
    can build a fresh library per case.

Thread-safety:
    Libraries are not locked. Register every macro before interpreting
    scenarios and do not share one library between threads that interpret
    or define concurrently.

Tags:
    stepspine, framework, registry, step-definition, lookup

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from stepspine.core.dictionary import Dictionary
from stepspine.core.errors import DuplicateMacroError
from stepspine.core.logging import get_logger
from stepspine.core.patterns import PatternLike, compile_pattern
from stepspine.core.utils import ensure_list
from stepspine.framework.macro import Macro, StepHandler

logger = get_logger(__name__)


class Library:
    """
    An ordered collection of macros sharing one Dictionary.

    Usage:
        library = Library()
        library.dictionary.define("count", r"(\\d+)")

        @library.macro("I have $count cukes")
        def have_cukes(ctx, count):
            ctx["cukes"].append(int(count))
    """

    def __init__(self, dictionary: Dictionary | None = None):
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self._macros: list[Macro] = []

    @property
    def macros(self) -> list[Macro]:
        return list(self._macros)

    def define(
        self,
        signatures: PatternLike | Iterable[PatternLike],
        handler: StepHandler,
        context: Mapping[str, Any] | None = None,
    ) -> Library:
        """
        Register ``handler`` under one or more signatures.

        Raises:
            DuplicateMacroError: If an equivalent signature is already registered
            InvalidPatternError: If a signature is not a valid pattern
            CircularDefinitionError: If a term used by a signature refers to itself
        """
        for signature in ensure_list(signatures):
            self._define_macro(signature, handler, context)
        return self

    def macro(
        self,
        *signatures: PatternLike,
        context: Mapping[str, Any] | None = None,
    ) -> Callable[[StepHandler], StepHandler]:
        """Decorator form of :meth:`define`."""

        def decorator(handler: StepHandler) -> StepHandler:
            self.define(list(signatures), handler, context)
            return handler

        return decorator

    def _define_macro(
        self,
        signature: PatternLike,
        handler: StepHandler,
        context: Mapping[str, Any] | None,
    ) -> None:
        compiled = compile_pattern(signature)
        if self.get_macro(compiled) is not None:
            raise DuplicateMacroError(compiled.source)
        macro = Macro(compiled, self.dictionary.expand(compiled.source), handler, context)
        self._macros.append(macro)
        logger.debug(
            "macro_defined",
            signature=macro.signature,
            handler=getattr(handler, "__name__", repr(handler)),
        )

    def get_macro(self, signature: PatternLike) -> Macro | None:
        """Find the macro registered under an equivalent signature."""
        for macro in self._macros:
            if macro.is_identified_by(signature):
                return macro
        return None

    def find_compatible_macros(self, step: str) -> list[Macro]:
        """Macros whose pattern matches ``step``, in registration order."""
        return [macro for macro in self._macros if macro.can_interpret(step)]

    def __len__(self) -> int:
        return len(self._macros)

    def __repr__(self) -> str:
        return f"Library(macros={len(self._macros)}, dictionary={self.dictionary!r})"
