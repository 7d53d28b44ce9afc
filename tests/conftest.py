"""Shared pytest fixtures for all test suites."""

import random
from collections.abc import Sequence
from typing import TypeVar

import pytest

from tripplanner.services.trip_planner import TripPlannerService

T = TypeVar("T")


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws in [0, 1).

    uniform(a, b) maps the next draw onto [a, b]; choice(seq) indexes with
    it. Raises IndexError when the script runs out.
    """

    def __init__(self, draws: Sequence[float]) -> None:
        self._draws = list(draws)
        self.used = 0

    def random(self) -> float:
        value = self._draws[self.used]
        self.used += 1
        return value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()

    def choice(self, seq: Sequence[T]) -> T:
        return seq[int(self.random() * len(seq))]


class SleepRecorder:
    """Async sleep stand-in that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    """Record simulated latency instead of sleeping."""
    return SleepRecorder()


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    """Factory for scripted random sources.

    Usage:
        def test_something(scripted_random):
            rng = scripted_random([0.5, 0.9])
    """
    return ScriptedRandom


@pytest.fixture
def service(sleeper: SleepRecorder) -> TripPlannerService:
    """Trip planner with a seeded RNG and no real sleeping."""
    return TripPlannerService(rng=random.Random(1234), sleep_fn=sleeper)
