"""
Shared pytest configuration.

Rate limiting is switched off before the application settings are first
imported, so API tests can issue as many requests as they need.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402


class ScriptedRandom:
    """Random source replaying fixed draws in [0, 1), cycling when exhausted."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws) or [0.5]
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self._index % len(self._draws)]
        self._index += 1
        self.calls += 1
        return value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()


@pytest.fixture
def scripted_random():
    """Factory building a ScriptedRandom from the given draws."""
    return ScriptedRandom
