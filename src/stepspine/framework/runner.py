"""Scenario runner with before/after hooks.

Manifesto:
    The runner wraps an Interpreter with an ambient context and a fixed set
    of lifecycle hooks (before → interpret → after), so test glue never
    re-implements context merging or hook ordering.

Hooks receive the scenario context dict, the same dict every step's context
is merged from, so values a ``before`` hook stores are visible to all steps
of that run. ``after`` only runs when every step succeeded.

Tags:
    stepspine, framework, runner, lifecycle, hooks

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from stepspine.core.environment import Environment
from stepspine.core.logging import log_step, new_scenario_id, push_context
from stepspine.core.utils import ensure_list
from stepspine.framework.interpreter import Interpreter
from stepspine.framework.library import Library


Hook = Callable[[dict[str, Any]], Any]


@dataclass
class ScenarioHooks:
    """Lifecycle hooks recognised by :class:`ScenarioRunner`."""

    before: Hook | None = None
    after: Hook | None = None


class ScenarioRunner:
    """
    Runs scenarios against a set of libraries.

    Usage:
        runner = ScenarioRunner(
            [cukes_library],
            context={"basket": basket},
            hooks=ScenarioHooks(before=reset_basket),
        )
        runner.run(["I have 5 cukes", "I eat 2 cukes"])
    """

    def __init__(
        self,
        libraries: Library | Iterable[Library],
        context: Mapping[str, Any] | None = None,
        hooks: ScenarioHooks | None = None,
    ):
        self.interpreter = Interpreter(libraries)
        self.hooks = hooks or ScenarioHooks()
        self._environment = Environment(context)

    def requires(self, libraries: Library | Iterable[Library]) -> ScenarioRunner:
        self.interpreter.requires(libraries)
        return self

    def run(self, script: str | Iterable[str], context: Mapping[str, Any] | None = None) -> list[Any]:
        """
        Run one scenario.

        Args:
            script: A single step or an ordered sequence of steps
            context: Values overlaid on the runner's ambient context for
                this run only

        Returns:
            The handler results, one per step
        """
        steps = ensure_list(script)
        env = self._environment.merge(context)

        token = push_context(scenario_id=new_scenario_id())
        try:
            with log_step("scenario.run", steps=len(steps)):
                if self.hooks.before is not None:
                    self.hooks.before(env.ctx)
                results = self.interpreter.interpret(steps, env.ctx)
                if self.hooks.after is not None:
                    self.hooks.after(env.ctx)
        finally:
            token.restore()
        return results

    def __str__(self) -> str:
        from stepspine import __version__

        return f"stepspine {__version__}"
