"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from protoclone import Constructor, DynamicObject, ReflectionSettings, get_settings


def _animal_init(this, a):
    this["a"] = a


FixtureAnimal = Constructor("Animal", _animal_init)


def _dog_init(this, a, b):
    FixtureAnimal.call(this, a)
    this["b"] = b


FixtureDog = Constructor("Dog", _dog_init, parent=FixtureAnimal)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def animal_cls():
    return FixtureAnimal


@pytest.fixture
def dog_cls():
    return FixtureDog


@pytest.fixture
def plain():
    """Fresh {a: 'A', b: 'B'} object."""
    return DynamicObject({"a": "A", "b": "B"})


@pytest.fixture
def legacy_settings():
    """Settings for a host without full reflection."""
    return ReflectionSettings(full_reflection=False)
