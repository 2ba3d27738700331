"""
stepspine framework - step definitions and their interpretation.

This module provides:
- Macro: one step definition (signature + handler + context)
- Library: an owned registry of macros sharing a Dictionary
- Competition: ranking of compatible macros for a step
- Interpreter: resolves and runs steps across libraries
- ScenarioRunner: interpreter facade with ambient context and hooks
"""

from stepspine.framework.competition import Competition, MatchCandidate
from stepspine.framework.interpreter import Interpreter
from stepspine.framework.library import Library
from stepspine.framework.macro import Macro, StepHandler
from stepspine.framework.runner import ScenarioHooks, ScenarioRunner

__all__ = [
    # Definitions
    "Macro",
    "StepHandler",
    "Library",
    # Resolution
    "Competition",
    "MatchCandidate",
    "Interpreter",
    # Runner
    "ScenarioRunner",
    "ScenarioHooks",
]
