"""Step interpreter.

Manifesto:
    The interpreter resolves each step of a scenario to exactly one macro
    and runs it, strictly in order. Resolution and execution of a step
    finish before the next step starts, and the first failure stops the
    scenario: there is no partial-success reporting and no rollback of
    steps that already ran.

Handlers run synchronously. If a handler returns an awaitable it is
returned as the step result without being awaited; awaiting it is the
caller's job.

Tags:
    stepspine, framework, interpreter, synchronous

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from stepspine.core.logging import bind_context, get_logger, log_step, push_context
from stepspine.core.utils import ensure_list
from stepspine.framework.competition import Competition
from stepspine.framework.library import Library
from stepspine.framework.macro import Macro

log = get_logger(__name__)


class Interpreter:
    """
    Interprets steps against one or more libraries.

    Libraries are searched in order and their compatible macros pooled, so a
    step defined in any library resolves, and a step defined equally well in
    two libraries is ambiguous.
    """

    def __init__(self, libraries: Library | Iterable[Library]):
        self.libraries: list[Library] = ensure_list(libraries)
        if not self.libraries:
            raise ValueError("Interpreter requires at least one library")

    def requires(self, libraries: Library | Iterable[Library]) -> Interpreter:
        """Add libraries to search for subsequent steps."""
        self.libraries.extend(ensure_list(libraries))
        log.debug("interpreter.requires", libraries=len(self.libraries))
        return self

    def interpret(self, script: str | Iterable[str], ctx: Mapping[str, Any] | None = None) -> list[Any]:
        """
        Interpret each step of ``script`` in order.

        Args:
            script: A single step or an ordered sequence of steps
            ctx: Context merged into every handler's context

        Returns:
            The handler results, one per step

        Raises:
            UndefinedStepError: If no macro matches a step
            AmbiguousStepError: If several macros match a step equally well
            Exception: Whatever a step handler raises, unchanged
        """
        return [self.interpret_step(step, ctx) for step in ensure_list(script)]

    def interpret_step(self, step: str, ctx: Mapping[str, Any] | None = None) -> Any:
        token = push_context(step=step)
        try:
            with log_step("step.interpret", level="debug") as timer:
                macro = self.competing_macros(step).clear_winner()
                timer.add_metric("macro", macro.signature)
                bind_context(macro=macro.signature)
                return macro.interpret(step, ctx)
        finally:
            token.restore()

    def competing_macros(self, step: str) -> Competition:
        return Competition(step, self.compatible_macros(step))

    def compatible_macros(self, step: str) -> list[Macro]:
        macros: list[Macro] = []
        for library in self.libraries:
            macros.extend(library.find_compatible_macros(step))
        return macros
