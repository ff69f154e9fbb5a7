"""Independent shallow copy.

Usage:
    original = Dog("A", DynamicObject({"c": "C"}))
    twin = copy(original)
    assert instance_of(twin, Dog)
    original["a"] = "AA"        # twin["a"] is still "A"
    original["b"]["c"] = "Car"  # twin["b"]["c"] is "Car" too (shared)
"""

from __future__ import annotations

from protoclone.config import ReflectionSettings
from protoclone.core.reflection import (
    create,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    own_keys,
    set_prototype_of,
)
from protoclone.core.types import Copy
from protoclone.core.value import DynamicObject, WrapperObject, is_object
from protoclone.duplication.native import copy_native, transfer_attributes

_OBJECT_STORAGE = frozenset(("_proto", "_props"))


def copy_dynamic(
    value: DynamicObject, *, settings: ReflectionSettings | None = None
) -> DynamicObject:
    """Copy a DynamicObject: same class, same prototype, own properties one level deep.

    Wrapper objects are rebuilt from their current wrapped value and keep
    their current prototype. Everything else is allocated without running a
    constructor and receives every own property reported by own_keys,
    descriptor attributes included.
    """
    if isinstance(value, WrapperObject):
        wrapper = WrapperObject(value.kind, value.primitive)
        return set_prototype_of(wrapper, get_prototype_of(value))
    cls = type(value)
    result = create(get_prototype_of(value), cls)
    for key in own_keys(value, settings=settings):
        descriptor = get_own_property_descriptor(value, key)
        if descriptor is not None:
            define_property(result, key, descriptor)
    if cls is not DynamicObject:
        # Subclass state outside the property table
        transfer_attributes(value, result, exclude=_OBJECT_STORAGE)
    return result


def copy[T](value: T, *, settings: ReflectionSettings | None = None) -> Copy[T]:
    """Create a new, independent shallow copy of value.

    Non-objects (None, undefined, scalars, functions) are returned unchanged.
    Wrapper and date values are duplicated by value. Other objects keep
    their class and prototype; top-level properties are copied, nested
    objects stay shared. Never raises for ordinary input.

    Args:
        value: Any runtime value.
        settings: Override for the process-wide reflection settings.

    Returns:
        The copy, or value itself when it is not an object.
    """
    if not is_object(value):
        return value
    if isinstance(value, DynamicObject):
        return copy_dynamic(value, settings=settings)  # type: ignore[return-value]
    return copy_native(value)  # type: ignore[no-any-return]
