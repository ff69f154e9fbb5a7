"""Tests for copy of dynamic objects.

Critical Invariants:
- Copies are never the source and never delegate to it
- Class identity (the whole prototype chain) is preserved
- Copies are shallow: nested objects stay shared
- Non-enumerable properties survive under full reflection
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from protoclone import (
    UNDEFINED,
    Constructor,
    DynamicObject,
    PropertyAccessError,
    PropertyDescriptor,
    box,
    copy,
    create,
    deep_equal,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    instance_of,
    new_date,
    own_keys,
    set_prototype_of,
)
from protoclone.duplication import copy_dynamic


def test_copy_non_object_types_pass_through():
    """Non-object types have value semantics and are returned as-is."""

    def fn():
        pass

    assert copy(1) == 1
    assert copy("b") == "b"
    assert copy(True) is True
    assert copy(fn) is fn
    assert copy(UNDEFINED) is UNDEFINED


@given(st.integers() | st.floats() | st.text() | st.booleans() | st.binary())
def test_copy_is_identity_on_primitives(value):
    assert copy(value) is value


def test_copy_null_returns_none():
    assert copy(None) is None


@pytest.mark.parametrize(
    "make", [lambda: box(123), lambda: box("abc"), lambda: box(True), new_date]
)
def test_copy_primitive_wrapper_objects(make):
    original = make()
    duplicate = copy(original)

    assert duplicate is not original
    assert deep_equal(duplicate, original)
    assert duplicate.kind is original.kind


def test_wrapper_copy_is_independent():
    original = box(1)
    duplicate = copy(original)

    duplicate["note"] = "mine"

    assert original["note"] is UNDEFINED


def test_wrapper_copy_keeps_relinked_prototype():
    """CRITICAL: A wrapper copy keeps the prototype of its source, not the default.

    Why: copy preserves prototype identity for every object, and a wrapper
    can be relinked away from its built-in prototype.
    """
    custom = DynamicObject({"unit": "kg"})
    original = set_prototype_of(box(1), custom)

    duplicate = copy(original)

    assert get_prototype_of(duplicate) is custom
    assert duplicate["unit"] == "kg"
    assert duplicate.primitive == 1


def test_copy_plain_object_properties(plain):
    duplicate = copy(plain)

    assert duplicate is not plain
    assert duplicate["a"] == "A"
    assert duplicate["b"] == "B"
    assert get_prototype_of(duplicate) is get_prototype_of(plain)


def test_changes_to_original_not_visible_through_copy(plain):
    duplicate = copy(plain)

    plain["b"] = "Banana"

    assert plain["b"] == "Banana"
    assert duplicate["b"] == "B"


def test_own_property_sets_are_independent(plain):
    duplicate = copy(plain)

    duplicate["c"] = "Car"
    del plain["a"]

    assert plain["c"] is UNDEFINED
    assert duplicate["a"] == "A"
    assert own_keys(plain) == ("b",)
    assert own_keys(duplicate) == ("a", "b", "c")


def test_shallow_copy_of_plain_object():
    original = DynamicObject({"a": "A", "b": DynamicObject({"c": "C"})})
    duplicate = copy(original)

    original["b"]["c"] = "Car"

    assert duplicate["b"]["c"] == "Car"
    assert duplicate["b"] is original["b"]


def test_copy_non_enumerable_properties_of_plain_object():
    original = DynamicObject({"a": "A"})
    define_property(original, "b", PropertyDescriptor("B", enumerable=False))

    duplicate = copy(original)

    assert original["b"] == "B"
    assert duplicate["b"] == "B"
    assert get_own_property_descriptor(duplicate, "b").enumerable is False


def test_copy_non_enumerable_properties_of_user_defined_class(dog_cls):
    original = dog_cls("A", "B")
    define_property(original, "c", PropertyDescriptor("C", enumerable=False))

    duplicate = copy(original)

    assert original["c"] == "C"
    assert duplicate["c"] == "C"


def test_copy_skips_non_enumerable_without_full_reflection(legacy_settings):
    """Legacy hosts degrade silently: hidden properties are simply omitted."""
    original = DynamicObject({"a": "A"})
    define_property(original, "b", PropertyDescriptor("B", enumerable=False))

    duplicate = copy(original, settings=legacy_settings)

    assert duplicate["a"] == "A"
    assert duplicate["b"] is UNDEFINED


def test_copy_honors_environment_setting(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_FULL_REFLECTION", "false")
    original = DynamicObject()
    define_property(original, "hidden", PropertyDescriptor(1, enumerable=False))

    assert own_keys(copy(original)) == ()


def test_copy_preserves_descriptor_attributes():
    original = DynamicObject()
    fixed = PropertyDescriptor(1, writable=False, enumerable=True, configurable=False)
    define_property(original, "fixed", fixed)

    duplicate = copy(original)

    assert get_own_property_descriptor(duplicate, "fixed") == fixed
    with pytest.raises(PropertyAccessError):
        duplicate["fixed"] = 2


def test_shallow_copy_of_a_class(dog_cls):
    original = dog_cls("A", DynamicObject({"c": "C"}))
    duplicate = copy(original)

    original["b"]["c"] = "Car"

    assert duplicate["b"]["c"] == "Car"


def test_copy_user_defined_class(animal_cls, dog_cls):
    """CRITICAL: A copy is an instance of every class the source is.

    Why: The prototype is shared, not flattened; instance_of must hold for
    each constructor along the chain.
    """
    original = dog_cls("A", "B")
    duplicate = copy(original)

    original["a"] = "AA"

    assert duplicate is not original
    assert duplicate["a"] == "A"
    assert duplicate["b"] == "B"
    assert instance_of(duplicate, dog_cls)
    assert instance_of(duplicate, animal_cls)


def test_copy_object_that_overrides_has_own_property(animal_cls, dog_cls):
    original = dog_cls("A", "B")
    original["hasOwnProperty"] = lambda this, key: False

    duplicate = copy(original)
    original["a"] = "AA"

    assert duplicate is not original
    assert duplicate["a"] == "A"
    assert duplicate["b"] == "B"
    assert instance_of(duplicate, dog_cls)
    assert instance_of(duplicate, animal_cls)


def test_copy_does_not_run_constructor():
    calls = []
    counted = Constructor("Counted", lambda this: calls.append(this))
    original = counted()

    copy(original)

    assert len(calls) == 1


def test_copy_object_without_prototype():
    original = create(None)
    original["a"] = 1

    duplicate = copy(original)

    assert get_prototype_of(duplicate) is None
    assert duplicate["a"] == 1


def test_copy_keeps_python_subclass_and_its_slots():
    class Tagged(DynamicObject):
        __slots__ = ("tag",)

    original = Tagged({"a": 1})
    original.tag = "blue"

    duplicate = copy_dynamic(original)

    assert type(duplicate) is Tagged
    assert duplicate.tag == "blue"
    assert duplicate["a"] == 1
