"""Core functionalities: the object model and host-level reflection.

Architecture Note:
    core/ contains the dynamic object model and pure functions over it.
    duplication/ builds clone and copy on top of these primitives.
"""

from protoclone.core.reflection import (
    create,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    has_own_property,
    own_keys,
    set_prototype_of,
)
from protoclone.core.types import Clone, Copy
from protoclone.core.value import (
    OBJECT,
    OBJECT_PROTOTYPE,
    UNDEFINED,
    Constructor,
    DynamicObject,
    PropertyAccessError,
    PropertyDescriptor,
    PropertyKey,
    Symbol,
    ValueKind,
    WrapperKind,
    WrapperObject,
    box,
    classify,
    deep_equal,
    instance_of,
    invoke,
    is_object,
    new_date,
    unbox,
)

__all__ = [
    # Types
    "Clone",
    "Copy",
    # Value
    "UNDEFINED",
    "Symbol",
    "PropertyKey",
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
]
