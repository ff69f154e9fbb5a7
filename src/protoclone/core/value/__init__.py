"""Value functionality: object model, models and pure operations."""

from protoclone.core.value.core import (
    OBJECT,
    OBJECT_PROTOTYPE,
    WRAPPER_PROTOTYPES,
    Constructor,
    DynamicObject,
    PropertyAccessError,
    WrapperObject,
    box,
    instance_of,
    invoke,
    new_date,
    to_property_key,
    unbox,
)
from protoclone.core.value.models import (
    UNDEFINED,
    PropertyDescriptor,
    PropertyKey,
    Symbol,
    ValueKind,
    WrapperKind,
)
from protoclone.core.value.operations import classify, deep_equal, is_object

__all__ = [
    # Models
    "UNDEFINED",
    "PropertyDescriptor",
    "PropertyKey",
    "Symbol",
    "ValueKind",
    "WrapperKind",
    # Object model
    "DynamicObject",
    "WrapperObject",
    "Constructor",
    "PropertyAccessError",
    "OBJECT",
    "OBJECT_PROTOTYPE",
    "WRAPPER_PROTOTYPES",
    "box",
    "unbox",
    "new_date",
    "instance_of",
    "invoke",
    "to_property_key",
    # Operations
    "classify",
    "is_object",
    "deep_equal",
]
