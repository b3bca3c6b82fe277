"""Core test fixtures for rolldice tests."""

import os

import pytest

from rolldice.config import get_settings


class ScriptedRoller:
    """Die source that returns preset values in order.

    Records the side count of every call so tests can check which dice
    were rolled.
    """

    def __init__(self, values):
        self._values = iter(values)
        self.calls: list[int] = []

    def __call__(self, sides: int) -> int:
        self.calls.append(sides)
        return next(self._values)


@pytest.fixture
def scripted_roller():
    """Factory for a ScriptedRoller with the given values."""
    return ScriptedRoller


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from ROLLDICE_* variables and cached settings."""
    for key in list(os.environ):
        if key.upper().startswith("ROLLDICE_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
