"""
Execution environment for step handlers.

An Environment is an immutable-by-convention mapping of names to values.
``merge`` never changes either side: it returns a new Environment holding a
shallow copy of this one overlaid with the other mapping, so a handler that
assigns into its context cannot leak values into the ambient context or into
the next step. Nested objects are shared, not copied.

Examples:
    >>> ambient = Environment({"browser": "firefox", "user": "alice"})
    >>> merged = ambient.merge({"user": "bob"})
    >>> dict(merged)
    {'browser': 'firefox', 'user': 'bob'}
    >>> ambient["user"]
    'alice'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class Environment(Mapping[str, Any]):
    """Shallow-mergeable execution context."""

    def __init__(self, ctx: Mapping[str, Any] | None = None):
        self.ctx: dict[str, Any] = dict(ctx or {})

    def merge(self, other: Mapping[str, Any] | None) -> Environment:
        """Return a new Environment with ``other`` overlaid on this one."""
        merged = Environment(self.ctx)
        merged.ctx.update(other or {})
        return merged

    def __getitem__(self, key: str) -> Any:
        return self.ctx[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.ctx)

    def __len__(self) -> int:
        return len(self.ctx)

    def __repr__(self) -> str:
        return f"Environment({self.ctx!r})"
