"""
Macro - one step definition.

A macro binds a signature (the pattern a step must match) to a handler. The
handler receives the merged execution context as its first argument and the
groups captured from the step as the remaining positional arguments::

    def add_cukes(ctx, count):
        ctx["basket"].add(int(count))

    Macro("I have $count cukes", r"I have (\\d+) cukes", add_cukes)

Tags:
    stepspine, framework, macro, step-definition

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from stepspine.core.environment import Environment
from stepspine.core.logging import get_logger
from stepspine.core.patterns import PatternLike, compile_pattern

logger = get_logger(__name__)

StepHandler = Callable[..., Any]


class Macro:
    """
    A signature, its expanded pattern, a handler and a bound context.

    Attributes:
        signature: Canonical form of the signature (``/source/flags``),
            used to detect duplicates
        pattern: The compiled, term-expanded pattern used for matching
        handler: Callable invoked as ``handler(ctx, *groups)``
    """

    def __init__(
        self,
        signature: PatternLike,
        signature_pattern: PatternLike,
        handler: StepHandler,
        context: Mapping[str, Any] | None = None,
    ):
        signature_regex = compile_pattern(signature)
        self.signature = normalise(signature_regex)
        self.pattern = compile_pattern(signature_pattern, flags=signature_regex.flags)
        self.handler = handler
        self._environment = Environment(context)

    def is_identified_by(self, other_signature: PatternLike) -> bool:
        return self.signature == normalise(other_signature)

    def can_interpret(self, step: str) -> bool:
        return self.pattern.test(step)

    def interpret(self, step: str, ctx: Mapping[str, Any] | None = None) -> Any:
        """
        Run the handler for ``step``.

        Only the first match's groups are passed to the handler. Errors raised
        by the handler propagate unchanged.
        """
        matches = self.pattern.groups(step)
        args = matches[0] if matches else []
        env = self._environment.merge(ctx)
        logger.debug("macro.interpret", macro=self.signature, args=args)
        return self.handler(env.ctx, *args)

    def similarity_key(self) -> str:
        """The expanded pattern stripped of regex syntax, for scoring."""
        return self.pattern.strip()

    def __str__(self) -> str:
        return self.signature

    def __repr__(self) -> str:
        return f"Macro({self.signature!r})"


def normalise(signature: PatternLike) -> str:
    """Canonical string form of a signature."""
    return str(compile_pattern(signature))
