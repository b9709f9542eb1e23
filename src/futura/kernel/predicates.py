"""Value classification used by the resolution procedure."""

from __future__ import annotations

from typing import Any

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def is_callable(value: Any) -> bool:
    return callable(value)


def is_object_like(value: Any) -> bool:
    """True when ``value`` may carry a ``then`` continuation.

    None and the immutable scalar builtins are treated as primitives and are
    never inspected.
    """
    return not isinstance(value, _PRIMITIVES)
