"""Small helpers shared by the library and interpreter."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

# Values that are iterable but always count as a single item
_ATOMIC_TYPES = (str, bytes, re.Pattern)


def ensure_list(value: Any) -> list[Any]:
    """
    Normalize ``value`` into a new list.

    ``None`` becomes an empty list, strings and compiled patterns become a
    one-item list, other iterables are copied.

    >>> ensure_list("I have $count cukes")
    ['I have $count cukes']
    >>> ensure_list(None)
    []
    """
    if value is None:
        return []
    if isinstance(value, _ATOMIC_TYPES) or not isinstance(value, Iterable):
        return [value]
    return list(value)
