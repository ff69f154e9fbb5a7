"""Dynamic object model: prototype-linked objects, wrappers and constructors.

Usage:
    point = DynamicObject({"x": 1, "y": 2})
    point["z"] = 3
    del point["x"]

    Animal = Constructor("Animal", init=lambda this, a: this.__setitem__("a", a))
    Dog = Constructor("Dog", parent=Animal)
    rex = Dog("A")
    assert instance_of(rex, Animal)

    boxed = box(123)
    assert unbox(boxed) == 123
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from datetime import UTC, datetime
from typing import Any

from protoclone.core.value.models import (
    UNDEFINED,
    PropertyDescriptor,
    PropertyKey,
    Symbol,
    WrapperKind,
)


class PropertyAccessError(TypeError):
    """Raised on strict-mode violations: read-only writes, non-configurable deletes."""

    pass


_ROOT = object()  # default prototype marker, resolved to OBJECT_PROTOTYPE


def to_property_key(key: Any) -> PropertyKey:
    """Normalize a subscript into a property key. Symbols stay, the rest become strings."""
    if isinstance(key, str | Symbol):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


class DynamicObject:
    """Object with a prototype link and an ordered own-property table.

    Item access follows ordinary property semantics: reads consult own
    properties first and then the prototype chain (live, on every read);
    writes always land on the object itself; deletes only ever touch own
    properties.

    Args:
        properties: Initial enumerable own properties.
        prototype: Delegation parent. Defaults to OBJECT_PROTOTYPE; pass None
            for an object with no prototype.
    """

    __slots__ = ("_proto", "_props", "__weakref__")

    def __init__(
        self,
        properties: Mapping[Any, Any] | None = None,
        /,
        *,
        prototype: DynamicObject | None | object = _ROOT,
    ) -> None:
        self._proto: DynamicObject | None = (
            OBJECT_PROTOTYPE if prototype is _ROOT else prototype  # type: ignore[assignment]
        )
        self._props: dict[PropertyKey, PropertyDescriptor] = {}
        for key, value in (properties or {}).items():
            self._props[to_property_key(key)] = PropertyDescriptor(value)

    @classmethod
    def _allocate(cls, prototype: DynamicObject | None) -> DynamicObject:
        """Create an empty instance of cls without running any initializer."""
        obj = cls.__new__(cls)
        obj._proto = prototype
        obj._props = {}
        return obj

    def _lookup(self, key: PropertyKey) -> PropertyDescriptor | None:
        obj: DynamicObject | None = self
        while obj is not None:
            desc = obj._props.get(key)
            if desc is not None:
                return desc
            obj = obj._proto
        return None

    def __getitem__(self, key: Any) -> Any:
        desc = self._lookup(to_property_key(key))
        return UNDEFINED if desc is None else desc.value

    def __setitem__(self, key: Any, value: Any) -> None:
        key = to_property_key(key)
        own = self._props.get(key)
        if own is not None:
            if not own.writable:
                raise PropertyAccessError(f"Cannot assign to read only property {key!r}")
            self._props[key] = dataclasses.replace(own, value=value)
            return
        inherited = self._proto._lookup(key) if self._proto is not None else None
        if inherited is not None and not inherited.writable:
            raise PropertyAccessError(f"Cannot assign to read only property {key!r}")
        self._props[key] = PropertyDescriptor(value)

    def __delitem__(self, key: Any) -> None:
        key = to_property_key(key)
        own = self._props.get(key)
        if own is None:
            return
        if not own.configurable:
            raise PropertyAccessError(f"Cannot delete property {key!r}")
        del self._props[key]

    def __contains__(self, key: Any) -> bool:
        return self._lookup(to_property_key(key)) is not None

    def __iter__(self) -> Iterator[PropertyKey]:
        """Iterate enumerable string keys, own first, then inherited (for-in order)."""
        seen: set[PropertyKey] = set()
        obj: DynamicObject | None = self
        while obj is not None:
            for key, desc in obj._props.items():
                if key in seen:
                    continue
                seen.add(key)
                if desc.enumerable and isinstance(key, str):
                    yield key
            obj = obj._proto

    def __repr__(self) -> str:
        shown = {k: d.value for k, d in self._props.items() if d.enumerable}
        ctor = self["constructor"]
        if isinstance(ctor, Constructor) and ctor is not OBJECT:
            return f"{ctor.name} {shown!r}"
        return f"{type(self).__name__}({shown!r})"


class WrapperObject(DynamicObject):
    """Boxed scalar or date value.

    Args:
        kind: Which value-object kind this is.
        primitive: The wrapped value, coerced to the kind.
    """

    __slots__ = ("_kind", "_primitive")

    def __init__(self, kind: WrapperKind, primitive: Any) -> None:
        super().__init__(prototype=WRAPPER_PROTOTYPES[kind])
        self._kind = kind
        self._primitive = _coerce(kind, primitive)

    @property
    def kind(self) -> WrapperKind:
        """Return the value-object kind."""
        return self._kind

    @property
    def primitive(self) -> Any:
        """Return the wrapped value."""
        return self._primitive

    def __repr__(self) -> str:
        return f"[{self._kind.value}: {self._primitive!r}]"


def _coerce(kind: WrapperKind, value: Any) -> Any:
    if isinstance(value, WrapperObject):
        value = value.primitive
    match kind:
        case WrapperKind.NUMBER:
            if isinstance(value, bool):
                return int(value)
            return value if isinstance(value, int | float) else float(value)
        case WrapperKind.STRING:
            return value if isinstance(value, str) else str(value)
        case WrapperKind.BOOLEAN:
            return bool(value)
        case WrapperKind.DATE:
            if isinstance(value, datetime):
                return value
            # epoch milliseconds
            return datetime.fromtimestamp(float(value) / 1000, tz=UTC)


def box(value: bool | int | float | str) -> WrapperObject:
    """Wrap a scalar in the matching wrapper object.

    Raises:
        TypeError: If value is not a boxable scalar.
    """
    if isinstance(value, bool):
        return WrapperObject(WrapperKind.BOOLEAN, value)
    if isinstance(value, int | float):
        return WrapperObject(WrapperKind.NUMBER, value)
    if isinstance(value, str):
        return WrapperObject(WrapperKind.STRING, value)
    raise TypeError(f"Cannot box value of type {type(value).__name__}")


def new_date(moment: datetime | float | None = None) -> WrapperObject:
    """Create a date wrapper. Accepts a datetime or epoch milliseconds; defaults to now."""
    return WrapperObject(WrapperKind.DATE, datetime.now(UTC) if moment is None else moment)


def unbox(value: Any) -> Any:
    """Return the wrapped value of a wrapper object, or value unchanged."""
    if isinstance(value, WrapperObject):
        return value.primitive
    return value


class Constructor:
    """User-defined class: an initializer plus a shared prototype object.

    Calling the constructor allocates an object delegating to `prototype` and
    runs `init(this, *args)`. Without an init, arguments are forwarded to the
    parent's initializer.

    Args:
        name: Class name, used in reprs.
        init: Initializer taking the new object first.
        parent: Base class; the prototype derives from parent.prototype.
    """

    __slots__ = ("name", "init", "parent", "prototype")

    def __init__(
        self,
        name: str,
        init: Callable[..., None] | None = None,
        parent: Constructor | None = None,
        *,
        prototype: DynamicObject | None = None,
    ) -> None:
        self.name = name
        self.init = init
        self.parent = parent
        if prototype is None:
            base = parent.prototype if parent is not None else OBJECT_PROTOTYPE
            prototype = DynamicObject(prototype=base)
        self.prototype = prototype
        prototype._props["constructor"] = PropertyDescriptor(self, enumerable=False)

    def __call__(self, *args: Any, **kwargs: Any) -> DynamicObject:
        this = DynamicObject._allocate(self.prototype)
        self.call(this, *args, **kwargs)
        return this

    def call(self, this: Any, *args: Any, **kwargs: Any) -> None:
        """Run the initializer on an existing object (super-constructor call).

        Raises:
            TypeError: If this is not a DynamicObject.
        """
        if not isinstance(this, DynamicObject):
            raise TypeError(f"{self.name}.call expects an object, got {type(this).__name__}")
        if self.init is not None:
            self.init(this, *args, **kwargs)
        elif self.parent is not None:
            self.parent.call(this, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<constructor {self.name}>"


def instance_of(value: Any, ctor: Constructor) -> bool:
    """Check whether ctor.prototype appears on value's prototype chain."""
    if not isinstance(value, DynamicObject):
        return False
    proto = value._proto
    while proto is not None:
        if proto is ctor.prototype:
            return True
        proto = proto._proto
    return False


def invoke(obj: DynamicObject, name: PropertyKey, *args: Any) -> Any:
    """Look up a method through obj's prototype chain and call it with obj as `this`.

    Raises:
        TypeError: If the property is not callable.
    """
    method = obj[name]
    if not callable(method):
        raise TypeError(f"{name!r} is not a function")
    return method(obj, *args)


# Built-in prototypes


def _has_own_property(this: DynamicObject, key: Any) -> bool:
    return to_property_key(key) in this._props


def _value_of(this: DynamicObject) -> Any:
    return unbox(this)


def _to_string(this: DynamicObject) -> str:
    if isinstance(this, WrapperObject):
        if this.kind is WrapperKind.BOOLEAN:
            return "true" if this.primitive else "false"
        if this.kind is WrapperKind.DATE:
            return this.primitive.isoformat()
        return str(this.primitive)
    return "[object Object]"


def _get_time(this: DynamicObject) -> float:
    if not isinstance(this, WrapperObject) or this.kind is not WrapperKind.DATE:
        raise TypeError("this is not a Date object")
    return this.primitive.timestamp() * 1000


def _builtin(
    methods: Mapping[str, Callable[..., Any]], prototype: DynamicObject | None
) -> DynamicObject:
    obj = DynamicObject._allocate(prototype)
    for name, method in methods.items():
        obj._props[name] = PropertyDescriptor(method, enumerable=False)
    return obj


OBJECT_PROTOTYPE: DynamicObject = _builtin(
    {
        "hasOwnProperty": _has_own_property,
        "valueOf": _value_of,
        "toString": _to_string,
    },
    None,
)

WRAPPER_PROTOTYPES: dict[WrapperKind, DynamicObject] = {
    kind: _builtin({"getTime": _get_time} if kind is WrapperKind.DATE else {}, OBJECT_PROTOTYPE)
    for kind in WrapperKind
}

OBJECT = Constructor("Object", prototype=OBJECT_PROTOTYPE)
