"""
Pytest fixtures for the password generator tests.
"""

import itertools
from datetime import datetime

import pytest

from core.session import SessionStore


FIXED_NOW = datetime(2024, 3, 5, 14, 30, 0)


class CyclingIndex:
    """Deterministic random-index provider: 0, 1, 2, ... wrapped to the pool size."""

    def __init__(self):
        self._counter = itertools.count()
        self.calls = []

    def __call__(self, n: int) -> int:
        self.calls.append(n)
        return next(self._counter) % n


@pytest.fixture
def cycling_rng():
    return CyclingIndex()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(fixed_clock):
    """A fresh session whose clock never moves."""
    return SessionStore(clock=fixed_clock)
