"""Tests for the price estimator."""

import math
import random

import pytest

from tripplanner.errors import InvalidInput
from tripplanner.pricing.estimator import (
    FLIGHT_VARIATION,
    HOTEL_VARIATION,
    activity_average_price,
    destination_multiplier,
    estimate_price,
    is_peak_month,
    seasonal_multiplier,
)


def test_estimate_price_midpoint_draw_applies_factors_only(scripted_random) -> None:
    """A draw at the middle of the band means zero variation."""
    rng = scripted_random([0.5])

    price = estimate_price(500, FLIGHT_VARIATION, 1.3, rng=rng)

    assert price == 650
    assert rng.used == 1


def test_estimate_price_band_edges(scripted_random) -> None:
    """Draws at 0 and 1 hit the lower and upper edges of the band."""
    assert estimate_price(100, FLIGHT_VARIATION, rng=scripted_random([1.0])) == 125
    assert estimate_price(120, HOTEL_VARIATION, rng=scripted_random([0.0])) == 102


def test_estimate_price_multiplies_all_factors(scripted_random) -> None:
    price = estimate_price(100, 0.0, 1.2, 0.5, 2.0, rng=scripted_random([0.3]))
    assert price == 120


def test_estimate_price_stays_within_variation_band() -> None:
    """Seeded sample stays inside base * (1 ± variation) * factor."""
    rng = random.Random(7)
    base, factor = 400, 1.3
    low = math.floor(base * (1 - FLIGHT_VARIATION) * factor)
    high = math.ceil(base * (1 + FLIGHT_VARIATION) * factor)

    prices = [estimate_price(base, FLIGHT_VARIATION, factor, rng=rng) for _ in range(2000)]

    assert all(isinstance(p, int) for p in prices)
    assert all(low <= p <= high for p in prices)
    # Spread should cover most of the band
    assert max(prices) - min(prices) > (high - low) * 0.8


@pytest.mark.parametrize("base", [float("nan"), float("inf"), -1, -0.01])
def test_estimate_price_rejects_invalid_base(base: float, scripted_random) -> None:
    with pytest.raises(InvalidInput, match="base"):
        estimate_price(base, FLIGHT_VARIATION, rng=scripted_random([0.5]))


def test_estimate_price_rejects_invalid_factor(scripted_random) -> None:
    with pytest.raises(InvalidInput, match="factor"):
        estimate_price(100, FLIGHT_VARIATION, -1.0, rng=scripted_random([0.5]))


def test_invalid_input_is_a_value_error() -> None:
    assert issubclass(InvalidInput, ValueError)


def test_seasonal_multiplier_peak_and_off_peak() -> None:
    """Jun-Sep and Dec (zero-based 5-8, 11) are peak."""
    peak = [m for m in range(12) if seasonal_multiplier(m) == 1.3]
    off_peak = [m for m in range(12) if seasonal_multiplier(m) == 0.9]

    assert peak == [5, 6, 7, 8, 11]
    assert off_peak == [0, 1, 2, 3, 4, 9, 10]
    assert is_peak_month(6) is True
    assert is_peak_month(0) is False


@pytest.mark.parametrize("month", [-1, 12])
def test_seasonal_multiplier_rejects_out_of_range_month(month: int) -> None:
    with pytest.raises(InvalidInput, match="month"):
        seasonal_multiplier(month)


def test_destination_multiplier_is_case_insensitive() -> None:
    assert destination_multiplier("Tokyo") == 1.4
    assert destination_multiplier("  new YORK ") == 1.2
    assert destination_multiplier("Delhi") == 0.5


def test_destination_multiplier_defaults_to_one() -> None:
    assert destination_multiplier("Reykjavik") == 1.0


def test_activity_average_price_range(scripted_random) -> None:
    assert activity_average_price(scripted_random([0.0])) == 25
    assert activity_average_price(scripted_random([0.999999])) == 100

    rng = random.Random(3)
    prices = [activity_average_price(rng) for _ in range(500)]
    assert all(25 <= p <= 100 for p in prices)
