"""Value models: sentinels, property descriptors and kind enums.

Usage:
    desc = PropertyDescriptor(value="B", enumerable=False)
    key = Symbol("tag")
    assert not UNDEFINED
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Final


class _Undefined:
    """Type of the `undefined` singleton. Python `None` plays `null`."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class Symbol:
    """Symbol-like primitive: unique, identity-hashed property key."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


type PropertyKey = str | Symbol


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Data property descriptor.

    Defaults match a property created by plain assignment.
    """

    value: Any = UNDEFINED
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True


class ValueKind(Enum):
    """Classification used by clone and copy to pick a branch."""

    NULL = auto()
    UNDEFINED = auto()
    PRIMITIVE = auto()  # scalars and immutable built-ins
    FUNCTION = auto()
    WRAPPER = auto()  # boxed scalars and date-like values
    OBJECT = auto()


class WrapperKind(Enum):
    """The finite set of value-object kinds copied by value."""

    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    DATE = "Date"
