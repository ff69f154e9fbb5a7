"""Reflection functionality: host-level enumeration and property definition."""

from protoclone.core.reflection.operations import (
    create,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    has_own_property,
    instance_dict,
    native_own_attributes,
    own_keys,
    set_prototype_of,
    slot_names,
)

__all__ = [
    "own_keys",
    "get_prototype_of",
    "set_prototype_of",
    "get_own_property_descriptor",
    "define_property",
    "has_own_property",
    "create",
    "instance_dict",
    "native_own_attributes",
    "slot_names",
]
