"""
stepspine logging - structured, scenario-aware logging.

This package provides:
- Structured logging with structlog
- Scenario/step context propagation via contextvars
- Timing helper for step and scenario spans
- Settings-based configuration

Usage:
    from stepspine.core.logging import configure_logging, get_logger, log_step

    configure_logging()
    log = get_logger(__name__)

    with log_step("scenario.run", steps=3):
        interpreter.interpret(steps)
"""

from stepspine.core.logging.config import configure_logging, is_configured, is_debug_enabled
from stepspine.core.logging.context import (
    LogContext,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    new_scenario_id,
    push_context,
    set_context,
)
from stepspine.core.logging.timing import TimingResult, log_step

__all__ = [
    # Configuration
    "configure_logging",
    "is_configured",
    "is_debug_enabled",
    # Context
    "get_logger",
    "set_context",
    "bind_context",
    "push_context",
    "clear_context",
    "get_context",
    "new_scenario_id",
    "LogContext",
    # Timing
    "log_step",
    "TimingResult",
]
