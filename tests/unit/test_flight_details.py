"""Tests for flight duration and stop-count resolution.

The stop policy is probabilistic: distribution tests use large seeded
samples and assert bounds, not exact values.
"""

import random
import re

import pytest

from tripplanner.pricing.flight_details import (
    DURATION_JITTER_HOURS,
    FlightDetails,
    base_duration_hours,
    format_duration,
    is_domestic_route,
    resolve_flight_details,
    stop_count,
)

SAMPLE_SIZE = 5000


@pytest.mark.parametrize(
    ("hours", "expected"),
    [
        (2.5, "2h 30m"),
        (1.0, "1h 0m"),
        (14.75, "14h 45m"),
        (1.999, "2h 0m"),
        (0.26, "0h 16m"),
    ],
)
def test_format_duration(hours: float, expected: str) -> None:
    assert format_duration(hours) == expected


def test_flight_details_duration_property() -> None:
    details = FlightDetails(hours=8.25, stops=1)
    assert details.duration == "8h 15m"


def test_is_domestic_route() -> None:
    assert is_domestic_route("Mumbai", " goa ") is True
    assert is_domestic_route("Kolkata", "Imphal") is True
    assert is_domestic_route("Mumbai", "Dubai") is False
    assert is_domestic_route("London", "Paris") is False


def test_base_duration_uses_reverse_key_and_defaults() -> None:
    assert base_duration_hours("Delhi", "Mumbai", is_domestic=True) == 2.5
    assert base_duration_hours("New York", "Mumbai", is_domestic=False) == 15.0
    assert base_duration_hours("Pune", "Jaipur", is_domestic=True) == 2.0
    assert base_duration_hours("Tokyo", "Sydney", is_domestic=False) == 8.0


def test_base_duration_uses_table_for_flag_only() -> None:
    """A domestic pair looked up as international falls back to the default."""
    assert base_duration_hours("Mumbai", "Delhi", is_domestic=False) == 8.0


@pytest.mark.parametrize(
    ("hours", "is_domestic", "draw", "expected"),
    [
        (2.0, True, 0.81, 1),
        (2.0, True, 0.8, 0),
        (3.5, False, 0.71, 0),
        (3.5, False, 0.7, 1),
        (7.0, False, 0.51, 1),
        (7.0, False, 0.5, 0),
        (15.0, False, 0.31, 1),
        (15.0, False, 0.3, 2),
        (10.0, False, 0.0, 2),
    ],
)
def test_stop_count_policy_thresholds(
    hours: float, is_domestic: bool, draw: float, expected: int, scripted_random
) -> None:
    assert stop_count(hours, is_domestic, scripted_random([draw])) == expected


def test_resolve_flight_details_jitter_bounds(scripted_random) -> None:
    """Jitter draws at 0 and 1 shift the base time by exactly ∓15 minutes."""
    low = resolve_flight_details("Mumbai", "Goa", True, scripted_random([0.0, 0.5]))
    high = resolve_flight_details("Mumbai", "Goa", True, scripted_random([1.0, 0.5]))

    assert low.duration == "1h 15m"
    assert high.duration == "1h 45m"


def test_resolve_flight_details_duration_format_and_range() -> None:
    rng = random.Random(11)
    pattern = re.compile(r"^\d+h \d{1,2}m$")

    for _ in range(500):
        details = resolve_flight_details("London", "New York", False, rng)
        assert pattern.match(details.duration)
        assert abs(details.hours - 8.0) <= DURATION_JITTER_HOURS
        minutes = int(details.duration.split("h ")[1].rstrip("m"))
        assert 0 <= minutes < 60


def test_domestic_one_stop_rate_is_about_twenty_percent() -> None:
    rng = random.Random(2024)

    stops = [resolve_flight_details("Mumbai", "Delhi", True, rng).stops for _ in range(SAMPLE_SIZE)]

    assert set(stops) <= {0, 1}
    one_stop_rate = stops.count(1) / SAMPLE_SIZE
    assert 0.17 <= one_stop_rate <= 0.23


def test_long_haul_international_never_direct() -> None:
    """Resolved duration >= 10h yields 1 or 2 stops only."""
    rng = random.Random(99)

    samples = [resolve_flight_details("Mumbai", "New York", False, rng) for _ in range(SAMPLE_SIZE)]

    assert all(d.hours >= 10 for d in samples)
    stops = [d.stops for d in samples]
    assert set(stops) == {1, 2}
    two_stop_rate = stops.count(2) / SAMPLE_SIZE
    assert 0.26 <= two_stop_rate <= 0.34


def test_short_haul_international_mostly_one_stop() -> None:
    rng = random.Random(5)

    stops = [resolve_flight_details("London", "Paris", False, rng).stops for _ in range(SAMPLE_SIZE)]

    assert set(stops) == {0, 1}
    assert 0.66 <= stops.count(1) / SAMPLE_SIZE <= 0.74
