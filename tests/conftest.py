"""Shared fixtures for the test suite."""

from __future__ import annotations

import os
import random

import pytest

# Keep a developer's .env from changing the defaults the tests assume.
os.environ["SHAMIR_SHARES_TOTAL"] = "10"
os.environ["SHAMIR_SHARES_THRESHOLD"] = "5"
os.environ["SHAMIR_COEFFICIENT_RETRY_LIMIT"] = "64"


class ScriptedRandom:
    """Randomness source that replays a fixed list of draws."""

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        if not self._draws:
            raise AssertionError("ScriptedRandom ran out of draws")
        return self._draws.pop(0) % stop


class ConstantRandom:
    """Randomness source that always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        return self.value % stop


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1182)
