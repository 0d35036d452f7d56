"""
Pytest fixtures for DICEWARE tests
"""

import logging
import os

import pytest

from diceware.config import get_settings


class ScriptedRandom:
    """Random source double that returns predetermined indices."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = next(self._values)
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def fruit_words() -> list:
    return ["apple", "apple", "Banana", "cherry"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop DICEWARE_* variables and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("DICEWARE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() so handlers never outlive a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
