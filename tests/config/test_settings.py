"""Tests for reflection settings."""

import pytest
from pydantic import ValidationError

from protoclone import ReflectionSettings, get_settings


def test_full_reflection_enabled_by_default(monkeypatch):
    monkeypatch.delenv("PROTOCLONE_FULL_REFLECTION", raising=False)
    assert ReflectionSettings().full_reflection is True


def test_environment_variable_disables_full_reflection(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_FULL_REFLECTION", "false")
    assert ReflectionSettings().full_reflection is False


def test_explicit_value_overrides_environment(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_FULL_REFLECTION", "false")
    assert ReflectionSettings(full_reflection=True).full_reflection is True


def test_settings_are_frozen():
    settings = ReflectionSettings()
    with pytest.raises(ValidationError):
        settings.full_reflection = False  # type: ignore[misc]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
