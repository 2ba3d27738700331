"""
Shared pytest fixtures and configuration for stepspine tests.

This module provides:
- Log context and settings cleanup for test isolation
- A cukes library (dictionary term + macros) used across scenario tests
- A recorder that captures handler calls

Usage:
    Fixtures are auto-discovered by pytest:

    def test_basic_match(cukes_library, recorder):
        Interpreter(cukes_library).interpret(["I have 5 cukes"])
        assert recorder.calls == [("have", ("5",))]
"""

import sys
from pathlib import Path
from typing import Any, Generator

import pytest

# Ensure stepspine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stepspine.core.logging import clear_context
from stepspine.core.settings import reset_settings
from stepspine.framework import Library


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration", "slow", "golden"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_log_context() -> Generator[None, None, None]:
    """Reset the logging contextvar before and after each test."""
    clear_context()
    yield
    clear_context()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop cached settings around each test.

    STEPSPINE_* variables from the developer's shell would otherwise leak
    into tests that rely on defaults.
    """
    for name in ("STEPSPINE_TERM_PREFIX", "STEPSPINE_LOG_LEVEL", "STEPSPINE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Library Fixtures
# =============================================================================


class Recorder:
    """Collects (label, args) for every handler call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.contexts: list[dict[str, Any]] = []

    def handler(self, label: str):
        def handle(ctx: dict[str, Any], *args: Any) -> str:
            self.calls.append((label, args))
            self.contexts.append(ctx)
            return label

        handle.__name__ = f"handle_{label}"
        return handle


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def cukes_library(recorder: Recorder) -> Library:
    """
    Library with a ``count`` term and a single cukes macro.

    ``I have $count cukes`` expands to ``I have (\\d+) cukes``.
    """
    library = Library()
    library.dictionary.define("count", r"(\d+)")
    library.define("I have $count cukes", recorder.handler("have"))
    return library
