"""Prototype-delegating clone.

Usage:
    original = DynamicObject({"a": "A", "b": "B"})
    view = clone(original)
    view["a"] = "Apple"        # original["a"] is still "A"
    original["b"] = "Banana"   # view["b"] is now "Banana"
    del view["a"]              # view["a"] falls through to original again
"""

from __future__ import annotations

from protoclone.core.reflection import create
from protoclone.core.types import Clone
from protoclone.core.value import DynamicObject, is_object
from protoclone.duplication.native import Delegate


def clone[T](value: T) -> Clone[T]:
    """Create an object that delegates unset reads to value.

    Non-objects (None, undefined, scalars, functions) are returned unchanged.
    A DynamicObject gets a fresh, empty object whose prototype is value
    itself; any other object gets a Delegate. Never raises.

    Args:
        value: Any runtime value.

    Returns:
        The clone, or value itself when it is not an object.
    """
    if not is_object(value):
        return value
    if isinstance(value, DynamicObject):
        return create(value)  # type: ignore[return-value]
    return Delegate(value)  # type: ignore[return-value]
