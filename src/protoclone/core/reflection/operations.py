"""Host-level reflection over object storage.

Every function here reads or writes an object's property table directly and
never resolves a method through the object itself, so an object that shadows
`hasOwnProperty` (or overrides `__getattribute__`) cannot mislead it.

Usage:
    keys = own_keys(obj)
    desc = get_own_property_descriptor(obj, "a")
    define_property(obj, "hidden", PropertyDescriptor("x", enumerable=False))
    child = create(obj)
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Iterator
from typing import Any

from protoclone.config import ReflectionSettings, get_settings
from protoclone.core.value.core import DynamicObject, PropertyAccessError, to_property_key
from protoclone.core.value.models import PropertyDescriptor, PropertyKey

logger = logging.getLogger(__name__)

_MISSING = object()


def _storage(obj: DynamicObject) -> dict[PropertyKey, PropertyDescriptor]:
    return object.__getattribute__(obj, "_props")  # type: ignore[no-any-return]


def _check_prototype(proto: Any) -> None:
    if proto is not None and not isinstance(proto, DynamicObject):
        raise TypeError(f"Object prototype may only be an object or None: {proto!r}")


def get_prototype_of(obj: DynamicObject) -> DynamicObject | None:
    """Return the delegation parent of obj."""
    return object.__getattribute__(obj, "_proto")  # type: ignore[no-any-return]


def set_prototype_of(obj: DynamicObject, proto: DynamicObject | None) -> DynamicObject:
    """Relink obj to a new prototype.

    Raises:
        TypeError: If proto is not an object or None, or the link would form a cycle.
    """
    _check_prototype(proto)
    ancestor = proto
    while ancestor is not None:
        if ancestor is obj:
            raise TypeError("Cyclic prototype value")
        ancestor = get_prototype_of(ancestor)
    object.__setattr__(obj, "_proto", proto)
    return obj


def create(proto: DynamicObject | None, cls: type[DynamicObject] = DynamicObject) -> DynamicObject:
    """Allocate an empty object of class cls delegating to proto.

    No initializer runs; the result has no own properties.

    Raises:
        TypeError: If proto is not an object or None.
    """
    _check_prototype(proto)
    return cls._allocate(proto)


def get_own_property_descriptor(obj: DynamicObject, key: Any) -> PropertyDescriptor | None:
    """Return the own descriptor for key, or None when obj has no such own property."""
    return _storage(obj).get(to_property_key(key))


def has_own_property(obj: Any, key: Any) -> bool:
    """Check for an own property without consulting obj's own hasOwnProperty."""
    if isinstance(obj, DynamicObject):
        return to_property_key(key) in _storage(obj)
    return key in native_own_attributes(obj)


def define_property(obj: DynamicObject, key: Any, descriptor: PropertyDescriptor) -> DynamicObject:
    """Create or redefine an own property with an explicit descriptor.

    Raises:
        PropertyAccessError: If an existing own property is non-configurable
            and the descriptor differs from it.
    """
    key = to_property_key(key)
    props = _storage(obj)
    current = props.get(key)
    if current is not None and not current.configurable and current != descriptor:
        raise PropertyAccessError(f"Cannot redefine property {key!r}")
    props[key] = descriptor
    return obj


def own_keys(obj: Any, *, settings: ReflectionSettings | None = None) -> tuple[Any, ...]:
    """List obj's own property keys in insertion order.

    Includes non-enumerable keys unless full reflection is disabled, in which
    case only enumerable keys are reported. Native Python objects report
    their instance attributes; primitives report nothing.

    Args:
        obj: Object to enumerate.
        settings: Override for the process-wide settings.

    Returns:
        Duplicate-free tuple of keys.
    """
    settings = settings or get_settings()
    if isinstance(obj, DynamicObject):
        props = _storage(obj)
        if settings.full_reflection:
            return tuple(props)
        logger.debug("full reflection disabled, listing enumerable keys only")
        return tuple(key for key, desc in props.items() if desc.enumerable)
    return tuple(native_own_attributes(obj))


# Native Python objects


def slot_names(cls: type) -> Iterator[str]:
    """Yield the storage names of every __slots__ entry along cls's MRO."""
    seen: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in seen:
                seen.add(name)
                yield name


def instance_dict(obj: Any) -> dict[str, Any] | None:
    """Return obj's instance __dict__ read at host level, or None if it has none."""
    for klass in type(obj).__mro__:
        descriptor = klass.__dict__.get("__dict__")
        if isinstance(descriptor, types.GetSetDescriptorType):
            namespace = descriptor.__get__(obj, type(obj))
            return namespace if isinstance(namespace, dict) else None
    return None


def native_own_attributes(obj: Any) -> dict[str, Any]:
    """Collect instance __dict__ entries and set slots of a native object.

    Classes that keep their attributes in a private table expose it through
    an `__own_attributes__` function, looked up on the class.
    """
    hook = inspect.getattr_static(type(obj), "__own_attributes__", None)
    if isinstance(hook, types.FunctionType):
        return dict(hook(obj))
    attributes: dict[str, Any] = {}
    namespace = instance_dict(obj)
    if namespace is not None:
        attributes.update(namespace)
    for name in slot_names(type(obj)):
        value = _read_slot(obj, name)
        if value is not _MISSING:
            attributes[name] = value
    return attributes


def _read_slot(obj: Any, name: str) -> Any:
    try:
        return object.__getattribute__(obj, name)
    except AttributeError:
        return _MISSING
