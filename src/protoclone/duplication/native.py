"""Duplication of native Python objects.

Python classes have no prototype chain, so a clone of a native object is a
`Delegate`: an explicit two-level lookup holding its own attributes plus a
live reference to the source. A copy allocates the same class without
running `__init__` and carries the instance state over one level deep.

Usage:
    view = Delegate(config)
    view.debug = True          # config.debug unchanged
    del view.debug             # config.debug visible again

    snapshot = copy_native(config)
"""

from __future__ import annotations

import copy as stdlib_copy
import inspect
import logging
import types
from datetime import date, datetime
from typing import Any

from protoclone.core.reflection import instance_dict, slot_names

logger = logging.getLogger(__name__)

# Type flags, as checked by copyreg.
_HEAPTYPE = 1 << 9
_IMMUTABLETYPE = 1 << 8

_CONTAINERS: tuple[type, ...] = (list, dict, set, bytearray)

_MISSING = object()


class Delegate:
    """Attribute-level clone of a native object.

    Reads check the delegate's own attributes, then forward to the source on
    every access. Writes land on the delegate; deletes only remove the
    delegate's own attributes and are a no-op otherwise. Functions defined on
    the source's class are bound to the delegate, so `self.x` inside a method
    sees shadowed values. Special methods are not forwarded.

    Args:
        base: Source object to delegate to.
    """

    __slots__ = ("__base", "__own")

    def __init__(self, base: Any) -> None:
        object.__setattr__(self, "_Delegate__base", base)
        object.__setattr__(self, "_Delegate__own", {})

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        return type(object.__getattribute__(self, "_Delegate__base"))

    def __getattr__(self, name: str) -> Any:
        own = object.__getattribute__(self, "_Delegate__own")
        if name in own:
            return own[name]
        base = object.__getattribute__(self, "_Delegate__base")
        namespace = instance_dict(base)
        if namespace is None or name not in namespace:
            attr = inspect.getattr_static(type(base), name, _MISSING)
            if isinstance(attr, types.FunctionType):
                return types.MethodType(attr, self)
        return getattr(base, name)

    def __setattr__(self, name: str, value: Any) -> None:
        object.__getattribute__(self, "_Delegate__own")[name] = value

    def __delattr__(self, name: str) -> None:
        object.__getattribute__(self, "_Delegate__own").pop(name, None)

    def __own_attributes__(self) -> dict[str, Any]:
        """Return the own attribute table; read by host-level reflection."""
        return object.__getattribute__(self, "_Delegate__own")  # type: ignore[no-any-return]

    def __dir__(self) -> list[str]:
        own = object.__getattribute__(self, "_Delegate__own")
        return sorted(set(own) | set(dir(object.__getattribute__(self, "_Delegate__base"))))

    def __repr__(self) -> str:
        return f"Delegate({object.__getattribute__(self, '_Delegate__base')!r})"


def delegate_base(view: Delegate) -> Any:
    """Return the object a delegate forwards to."""
    return object.__getattribute__(view, "_Delegate__base")


def delegate_own(view: Delegate) -> dict[str, Any]:
    """Return the delegate's own attribute table (live, not a copy)."""
    return object.__getattribute__(view, "_Delegate__own")  # type: ignore[no-any-return]


def _python_defined(cls: type) -> bool:
    return bool(cls.__flags__ & _HEAPTYPE) and not cls.__flags__ & _IMMUTABLETYPE


def _allocatable(cls: type) -> bool:
    return all(
        base is object or base in _CONTAINERS or _python_defined(base) for base in cls.__mro__
    )


def _copy_date(value: date) -> date:
    cls = type(value)
    if isinstance(value, datetime):
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )
    return cls(value.year, value.month, value.day)


def transfer_attributes(source: Any, target: Any, exclude: frozenset[str] = frozenset()) -> None:
    """Copy instance __dict__ entries and set slots from source to target, shallowly."""
    namespace = instance_dict(source)
    target_namespace = instance_dict(target)
    if namespace and target_namespace is not None:
        target_namespace.update((k, v) for k, v in namespace.items() if k not in exclude)
    for name in slot_names(type(source)):
        if name in exclude:
            continue
        try:
            value = object.__getattribute__(source, name)
        except AttributeError:
            continue
        object.__setattr__(target, name, value)


def copy_native(value: Any) -> Any:
    """Shallow-copy a native Python object, preserving its class.

    Python-defined classes (and list, dict, set, bytearray subclasses) are
    allocated without `__init__` and receive the container payload plus
    instance attributes. Dates are rebuilt from their fields. Other
    extension types go through the standard library `copy.copy`.

    Args:
        value: Native object to copy.

    Returns:
        A new object of the same class.
    """
    cls = type(value)
    if cls is Delegate:
        result = Delegate(delegate_base(value))
        delegate_own(result).update(delegate_own(value))
        return result
    if isinstance(value, date):
        return _copy_date(value)
    if not _allocatable(cls):
        logger.debug("copying %s via copy.copy", cls.__qualname__)
        return stdlib_copy.copy(value)
    try:
        result = cls.__new__(cls)
    except TypeError:
        logger.debug("%s cannot be allocated bare, copying via copy.copy", cls.__qualname__)
        return stdlib_copy.copy(value)

    if isinstance(value, list):
        list.extend(result, value)
    elif isinstance(value, dict):
        dict.update(result, value)
    elif isinstance(value, set):
        set.update(result, value)
    elif isinstance(value, bytearray):
        bytearray.extend(result, value)
    transfer_attributes(value, result)
    return result
