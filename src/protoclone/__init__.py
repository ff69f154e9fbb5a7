"""protoclone: prototype-delegating clones and shallow copies for dynamic objects.

Usage:
    from protoclone import DynamicObject, clone, copy

    original = DynamicObject({"a": "A", "b": "B"})

    view = clone(original)      # reads fall through to original, live
    view["a"] = "Apple"         # original untouched

    twin = copy(original)       # independent, same prototype
    original["b"] = "Banana"    # twin["b"] is still "B"
"""

__version__ = "0.1.0"

# Configuration
from protoclone.config import ReflectionSettings, get_settings

# Core primitives
from protoclone.core import (
    OBJECT,
    OBJECT_PROTOTYPE,
    UNDEFINED,
    Clone,
    Constructor,
    Copy,
    DynamicObject,
    PropertyAccessError,
    PropertyDescriptor,
    Symbol,
    ValueKind,
    WrapperKind,
    WrapperObject,
    box,
    classify,
    create,
    deep_equal,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    has_own_property,
    instance_of,
    invoke,
    is_object,
    new_date,
    own_keys,
    set_prototype_of,
    unbox,
)

# Duplication
from protoclone.duplication import Delegate, clone, copy

__all__ = [
    # Version
    "__version__",
    # Duplication
    "clone",
    "copy",
    "Delegate",
    # Types
    "Clone",
    "Copy",
    # Object model
    "UNDEFINED",
    "Symbol",
    "PropertyDescriptor",
    "ValueKind",
    "WrapperKind",
    "DynamicObject",
    "WrapperObject",
    "Constructor",
    "PropertyAccessError",
    "OBJECT",
    "OBJECT_PROTOTYPE",
    "box",
    "unbox",
    "new_date",
    "instance_of",
    "invoke",
    "classify",
    "is_object",
    "deep_equal",
    # Reflection
    "own_keys",
    "get_prototype_of",
    "set_prototype_of",
    "get_own_property_descriptor",
    "define_property",
    "has_own_property",
    "create",
    # Config
    "ReflectionSettings",
    "get_settings",
]
