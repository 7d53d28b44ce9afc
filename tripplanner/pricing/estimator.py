"""Price estimation: base value x random variation x context multipliers."""

import math

from tripplanner.errors import InvalidInput
from tripplanner.pricing.rng import RandomSource
from tripplanner.pricing.tables import (
    ACTIVITY_PRICE_MIN,
    ACTIVITY_PRICE_SPREAD,
    DESTINATION_MULTIPLIERS,
    OFF_PEAK_MULTIPLIER,
    PEAK_MONTHS,
    PEAK_SEASON_MULTIPLIER,
    normalize_place,
)

# Symmetric variation bands per quote domain
FLIGHT_VARIATION = 0.25
HOTEL_VARIATION = 0.15


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(f"{name} must be a finite non-negative number, got {value!r}")


def estimate_price(
    base: float,
    variation: float,
    *factors: float,
    rng: RandomSource,
) -> int:
    """Estimate a price around a base value.

    Args:
        base: Table base price
        variation: Half-width of the uniform variation band (0.25 = ±25%)
        *factors: Multiplicative context factors (season, destination, ...)
        rng: Random source for the variation draw

    Returns:
        round(base * (1 + v) * product(factors)), v uniform in [-variation, variation]

    Raises:
        InvalidInput: If base, variation or any factor is negative or non-finite
    """
    _require_non_negative("base", base)
    _require_non_negative("variation", variation)
    for factor in factors:
        _require_non_negative("factor", factor)

    v = rng.uniform(-variation, variation)
    return round(base * (1 + v) * math.prod(factors))


def seasonal_multiplier(month: int) -> float:
    """Seasonal price multiplier for a zero-based month (0 = January)."""
    if not 0 <= month <= 11:
        raise InvalidInput(f"month must be in 0..11, got {month}")
    return PEAK_SEASON_MULTIPLIER if month in PEAK_MONTHS else OFF_PEAK_MULTIPLIER


def is_peak_month(month: int) -> bool:
    """Whether a zero-based month falls in peak season."""
    return month in PEAK_MONTHS


def destination_multiplier(destination: str) -> float:
    """Cost-of-stay multiplier for a destination (1.0 when unknown)."""
    return DESTINATION_MULTIPLIERS.get(normalize_place(destination), 1.0)


def activity_average_price(rng: RandomSource) -> int:
    """Average per-activity price, uniform in 25..100."""
    return round(ACTIVITY_PRICE_MIN + rng.random() * ACTIVITY_PRICE_SPREAD)
