"""Pure functions over values: classification and structural equality."""

from __future__ import annotations

import decimal
import enum
import fractions
import re
import types
from datetime import date, time, timedelta, tzinfo
from typing import Any

from protoclone.core.value.core import Constructor, DynamicObject, WrapperObject
from protoclone.core.value.models import UNDEFINED, Symbol, ValueKind

# Immutable values and singletons; never duplicated.
_ATOMIC_TYPES: tuple[type, ...] = (
    int,
    float,
    complex,
    str,
    bytes,
    Symbol,
    tuple,
    frozenset,
    range,
    enum.Enum,
    re.Pattern,
    decimal.Decimal,
    fractions.Fraction,
    time,
    timedelta,
    tzinfo,
    types.EllipsisType,
    types.NotImplementedType,
)

_FUNCTION_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    type,
    Constructor,
)


def classify(value: Any) -> ValueKind:
    """Classify a value for duplication purposes.

    Args:
        value: Any runtime value.

    Returns:
        NULL for None, UNDEFINED for the undefined singleton, PRIMITIVE for
        scalars and immutable built-ins, FUNCTION for callables that are
        functions or classes, WRAPPER for boxed and date-like values, OBJECT
        for everything else.
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, WrapperObject | date):
        return ValueKind.WRAPPER
    if isinstance(value, DynamicObject):
        return ValueKind.OBJECT
    if isinstance(value, _ATOMIC_TYPES):
        return ValueKind.PRIMITIVE
    if isinstance(value, _FUNCTION_TYPES):
        return ValueKind.FUNCTION
    return ValueKind.OBJECT


def is_object(value: Any) -> bool:
    """Check whether value is an object (null-safe: None is not an object)."""
    return classify(value) in (ValueKind.WRAPPER, ValueKind.OBJECT)


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality in the spirit of a test-framework `toEqual`.

    Dynamic objects are equal when they share a prototype, wrap equal values
    and carry the same enumerable own keys with deep-equal values. Lists,
    tuples and dicts compare element-wise; anything else falls back to `==`.
    Not cycle-safe.
    """
    if a is b:
        return True
    if isinstance(a, DynamicObject) or isinstance(b, DynamicObject):
        if type(a) is not type(b) or a._proto is not b._proto:
            return False
        if isinstance(a, WrapperObject):
            if a.kind is not b.kind or a.primitive != b.primitive:
                return False
        own_a = {k: d.value for k, d in a._props.items() if d.enumerable}
        own_b = {k: d.value for k, d in b._props.items() if d.enumerable}
        if own_a.keys() != own_b.keys():
            return False
        return all(deep_equal(v, own_b[k]) for k, v in own_a.items())
    if isinstance(a, list | tuple) and isinstance(b, list | tuple):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(v, b[k]) for k, v in a.items())
    return bool(a == b)
